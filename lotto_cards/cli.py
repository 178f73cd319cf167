from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from tqdm import tqdm

from lotto_cards.core.config import FIELD_LABELS, FIELD_RANGES, Configuration
from lotto_cards.core.document import default_filename, generate_document
from lotto_cards.core.fonts import TYPEFACES, FontFamily, ReportLabFontProvider


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lotto-cards",
        description="Generate printable Russian Lotto cards as an A4 PDF.",
    )
    defaults = Configuration()
    for name, (lo, hi) in FIELD_RANGES.items():
        parser.add_argument(
            "--" + name.replace("_", "-"),
            dest=name,
            default=None,
            metavar="N",
            help=f"{FIELD_LABELS[name]}, {lo}..{hi} (default: {getattr(defaults, name)})",
        )
    parser.add_argument(
        "--font-family",
        default=None,
        choices=[f.value for f in FontFamily],
        help=f"Font variant (default: {defaults.font_family.value})",
    )
    parser.add_argument(
        "--typeface",
        default="Helvetica",
        help=f"Base typeface: {', '.join(t.title() for t in TYPEFACES)} (default: Helvetica)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible cards")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Clamp out-of-range settings instead of rejecting them",
    )
    parser.add_argument("-o", "--output", default=None, help="Output PDF path (default: timestamped name)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Hide the progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress details")
    return parser


def main(argv: list[str]) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, format=LOG_FORMAT)

    values = {name: getattr(args, name) for name in FIELD_RANGES}
    values["font_family"] = args.font_family
    config = Configuration.from_mapping(values, strict=not args.lenient)

    output = Path(args.output).expanduser() if args.output else Path(default_filename())
    if output.parent and not output.parent.exists():
        raise RuntimeError(f"Output directory does not exist:\n  {output.parent}")

    with tqdm(total=config.page_count, desc="Pages", unit="page", disable=args.quiet) as progress:
        document = generate_document(
            config,
            seed=args.seed,
            fonts=ReportLabFontProvider(args.typeface),
            on_page=lambda _page: progress.update(1),
        )

    document.write(output)
    logger.info("Wrote %d bytes to %s", len(document.pdf), output)
    print(f"Wrote {document.card_count} cards on {len(document.pages)} page(s) to {output}")
    return 0


def run() -> None:
    try:
        raise SystemExit(main(sys.argv[1:]))
    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        raise SystemExit(130)
    except Exception as exc:
        msg = str(exc).rstrip() or repr(exc)
        if "\n" in msg:
            first, rest = msg.split("\n", 1)
            print(f"ERROR: {first}", file=sys.stderr)
            print(rest, file=sys.stderr)
        else:
            print(f"ERROR: {msg}", file=sys.stderr)
        raise SystemExit(2)


if __name__ == "__main__":
    run()
