import sys

import pytest

from lotto_cards import cli
from lotto_cards.core.config import ConfigurationError


def test_main_writes_pdf(tmp_path, capsys):
    out = tmp_path / "cards.pdf"
    rc = cli.main(["--page-count", "2", "--seed", "1", "--font-family", "bold", "-q", "-o", str(out)])
    assert rc == 0
    assert out.read_bytes().startswith(b"%PDF-")
    assert "8 cards on 2 page(s)" in capsys.readouterr().out


def test_main_rejects_out_of_range_settings(tmp_path):
    with pytest.raises(ConfigurationError, match="between 16 and 36"):
        cli.main(["--font-size", "80", "-q", "-o", str(tmp_path / "x.pdf")])


def test_main_lenient_clamps(tmp_path, capsys):
    out = tmp_path / "cards.pdf"
    rc = cli.main(["--page-count", "0", "--lenient", "-q", "-o", str(out)])
    assert rc == 0
    assert "on 1 page(s)" in capsys.readouterr().out


def test_main_rejects_missing_output_directory(tmp_path):
    with pytest.raises(RuntimeError, match="does not exist"):
        cli.main(["-q", "-o", str(tmp_path / "missing" / "cards.pdf")])


def test_run_reports_errors_with_exit_code(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["lotto-cards", "--page-count", "abc", "-q"])
    with pytest.raises(SystemExit) as excinfo:
        cli.run()
    assert excinfo.value.code == 2
    assert capsys.readouterr().err.startswith("ERROR: Invalid configuration")


def test_main_unknown_typeface_still_writes_pdf(tmp_path):
    out = tmp_path / "cards.pdf"
    rc = cli.main(["--typeface", "Wingdings", "--page-count", "1", "-q", "-o", str(out)])
    assert rc == 0
    assert out.read_bytes().startswith(b"%PDF-")
