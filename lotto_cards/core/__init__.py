"""
Core modules (card generator, layout, PDF renderer, document assembler).

Import submodules directly:
- `lotto_cards.core.config`
- `lotto_cards.core.generator`
- `lotto_cards.core.layout`
- `lotto_cards.core.pdf`
- `lotto_cards.core.document`
"""

__all__ = []
