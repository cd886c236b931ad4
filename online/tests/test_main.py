"""Tests for the command-line entry point in online/main.py."""

from online.main import main


def _catalog(tmp_path):
    path = tmp_path / "funds.csv"
    path.write_text("name,category,yearlyROI\nA,Large Cap,8\nB,Small Cap,15\nC,Index,6\n", encoding="utf-8")
    return str(path)


def test_cli_prints_recommendations(tmp_path, capsys):
    code = main(["--amount", "9000", "--risk", "low", "--period", "5",
                 "--catalog", _catalog(tmp_path), "--log-level", "ERROR"])

    out = capsys.readouterr().out
    assert code == 0
    assert "1. A" in out
    assert "2. C" in out
    assert "Page 1 of 1" in out


def test_cli_missing_period_prompts(tmp_path, capsys):
    code = main(["--amount", "9000", "--catalog", _catalog(tmp_path), "--log-level", "ERROR"])

    assert code == 1
    assert "years" in capsys.readouterr().out


def test_cli_unknown_risk_exits_2(tmp_path):
    code = main(["--amount", "9000", "--period", "5", "--risk", "extreme",
                 "--catalog", _catalog(tmp_path), "--log-level", "ERROR"])
    assert code == 2


def test_cli_missing_catalog_exits_2(tmp_path):
    code = main(["--amount", "9000", "--period", "5",
                 "--catalog", str(tmp_path / "missing.csv"), "--log-level", "ERROR"])
    assert code == 2


def test_cli_pages_bundled_catalog(capsys):
    code = main(["--amount", "10000", "--risk", "medium", "--period", "5",
                 "--page", "2", "--log-level", "ERROR"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Page 2 of 2" in out
