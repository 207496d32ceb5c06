import pytest

from vanity import cli
from vanity.errors import EntropyGenerationError, SearchTimedOut
from vanity.schemas.result import SearchResult

ADDRESS = "0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf"
WORDS = tuple(["abandon"] * 23 + ["art"])


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda level="INFO": None)


def run_main(argv):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    return exc.value.code


def test_cli_rejects_invalid_prefix(capsys):
    assert run_main(["--prefix", "12345"]) == cli.EXIT_INVALID
    assert "Invalid prefix or suffix" in capsys.readouterr().out


def test_cli_rejects_invalid_timeout(capsys):
    assert run_main(["--prefix", "0xab", "--timeout", "-1"]) == cli.EXIT_INVALID
    assert "SEARCH_TIMEOUT_SECONDS" in capsys.readouterr().out


def test_cli_prints_result(monkeypatch, capsys):
    calls = {}

    def fake_search(criteria, workers, settings):
        calls["criteria"] = criteria
        calls["workers"] = workers
        return SearchResult(mnemonic=WORDS, address=ADDRESS, iterations=3, elapsed_seconds=0.2)

    monkeypatch.setattr(cli, "run_search_sync", fake_search)

    assert run_main(["--prefix", "0x7E5", "--suffix", "df", "--workers", "2"]) == cli.EXIT_OK

    out = capsys.readouterr().out
    assert ADDRESS in out
    assert " 24. art" in out
    assert calls["criteria"].prefix == "0x7E5"
    assert calls["criteria"].suffix == "df"
    assert calls["workers"] == 2


def test_cli_reports_timeout(monkeypatch, capsys):
    def fake_search(criteria, workers, settings):
        raise SearchTimedOut("deadline", 42, 1.0)

    monkeypatch.setattr(cli, "run_search_sync", fake_search)

    assert run_main(["--suffix", "abc", "--timeout", "1"]) == cli.EXIT_NOT_FOUND
    assert "No match" in capsys.readouterr().out


def test_cli_reports_interrupt_as_no_match(monkeypatch, capsys):
    def fake_search(criteria, workers, settings):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "run_search_sync", fake_search)

    assert run_main(["--prefix", "0x12345", "--suffix", "67"]) == cli.EXIT_NOT_FOUND
    assert "No match: search interrupted" in capsys.readouterr().out


def test_cli_reports_systemic_failure(monkeypatch, capsys):
    def fake_search(criteria, workers, settings):
        raise EntropyGenerationError("secure random source unavailable: OSError")

    monkeypatch.setattr(cli, "run_search_sync", fake_search)

    assert run_main(["--suffix", "abc"]) == cli.EXIT_FAILED
    assert "EntropyGenerationError" in capsys.readouterr().out
