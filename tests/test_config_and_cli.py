from __future__ import annotations

import json

import pytest

from ledger_query import __version__, cli
from ledger_query.config import Settings, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("LOG_LEVEL", "LEDGER_PATH", "LEDGER_STRICT"):
        monkeypatch.delenv(name, raising=False)
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


def _write_ledger(path, records) -> None:
    path.write_text("\n".join(json.dumps(r) for r in records) + "\n", encoding="utf-8")


def test_settings_defaults_and_env(monkeypatch, tmp_path):
    s = Settings()
    assert s.log_level == "INFO"
    assert s.ledger_path is None
    assert s.ledger_strict is False

    monkeypatch.setenv("LEDGER_PATH", str(tmp_path / "l.jsonl"))
    monkeypatch.setenv("LEDGER_STRICT", "true")
    s = Settings()
    assert s.ledger_path == tmp_path / "l.jsonl"
    assert s.ledger_strict is True


def test_settings_reject_unknown_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError):
        load_settings()


def test_cli_version(capsys):
    assert cli.main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == __version__


def test_cli_health(capsys):
    assert cli.main(["health"]) == 0
    assert capsys.readouterr().out.strip() == "ok"


def test_cli_report_uses_sample(capsys):
    assert cli.main(["report"]) == 0
    out = capsys.readouterr().out
    assert "Transaction analysis (5 transactions)" in out
    assert "580.00" in out


def test_cli_facts_json(capsys):
    assert cli.main(["facts"]) == 0
    facts = json.loads(capsys.readouterr().out)
    assert facts["totals"]["debit"] == 430.0
    assert facts["busiest_month"] == 2


def test_cli_range_and_find(capsys):
    assert cli.main(["range", "2019-01-01", "2019-01-31"]) == 0
    out = capsys.readouterr().out
    assert "#1 " in out and "#2 " in out
    assert "count = 2" in out

    assert cli.main(["find", "3"]) == 0
    assert capsys.readouterr().out.startswith("#3 ")

    assert cli.main(["find", "99"]) == 1
    assert capsys.readouterr().out.strip() == "not found"


def test_cli_amount_range_and_bad_date(capsys):
    assert cli.main(["amount-range", "50", "100"]) == 0
    assert "count = 3" in capsys.readouterr().out

    assert cli.main(["before", "not-a-date"]) == 2
    assert "error:" in capsys.readouterr().err


def test_cli_reads_ledger_file(tmp_path, capsys):
    path = tmp_path / "ledger.jsonl"
    _write_ledger(
        path,
        [
            {
                "transaction_id": "a",
                "transaction_date": "2021-06-01",
                "transaction_amount": "9.99",
                "transaction_type": "credit",
                "transaction_description": "Cashback",
                "merchant_name": "Bank",
                "card_type": "credit",
            }
        ],
    )

    assert cli.main(["--ledger", str(path), "by-type", "credit"]) == 0
    out = capsys.readouterr().out
    assert "#a 2021-06-01 credit 9.99 Bank" in out
    assert "count = 1" in out


def test_cli_ledger_from_env(monkeypatch, tmp_path, capsys):
    path = tmp_path / "ledger.jsonl"
    _write_ledger(path, [])
    monkeypatch.setenv("LEDGER_PATH", str(path))

    assert cli.main(["by-merchant", "SuperMart"]) == 0
    assert "count = 0" in capsys.readouterr().out


def test_cli_missing_ledger(tmp_path, capsys):
    assert cli.main(["--ledger", str(tmp_path / "missing.json"), "report"]) == 2
    assert "error:" in capsys.readouterr().err


def test_cli_strict_ledger(tmp_path, capsys):
    path = tmp_path / "ledger.jsonl"
    _write_ledger(path, [{"transaction_id": "x"}])

    assert cli.main(["--ledger", str(path), "report"]) == 0
    capsys.readouterr()

    assert cli.main(["--ledger", str(path), "--strict", "report"]) == 2
    assert "line 1" in capsys.readouterr().err


@pytest.mark.parametrize("bad", ["nan", "inf", "sNaN"])
def test_cli_amount_range_rejects_non_finite(bad, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["amount-range", bad, "5"])
    assert exc.value.code == 2
    assert "finite" in capsys.readouterr().err


def test_cli_non_utf8_ledger(tmp_path, capsys):
    path = tmp_path / "ledger.json"
    path.write_bytes(b"\xff\xfe[")

    assert cli.main(["--ledger", str(path), "report"]) == 2
    assert "UTF-8" in capsys.readouterr().err


def test_cli_ledger_is_directory(tmp_path, capsys):
    assert cli.main(["--ledger", str(tmp_path), "facts"]) == 2
    assert "not a regular file" in capsys.readouterr().err
