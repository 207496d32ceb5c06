import logging

from vanity.logging_config import SecretFilter, log_search_failed, log_search_won
from vanity.errors import EntropyGenerationError


def make_record(msg, args=()):
    return logging.LogRecord("vanity.test", logging.INFO, __file__, 1, msg, args, None)


def test_secret_filter_redacts_key_material():
    record = make_record("mnemonic=%s", ("abandon about",))

    assert SecretFilter().filter(record) is True
    assert record.getMessage() == "[REDACTED - Sensitive data filtered]"


def test_secret_filter_keeps_ordinary_messages():
    record = make_record("Search started prefix=%r", ("0xab",))

    SecretFilter().filter(record)

    assert record.getMessage() == "Search started prefix='0xab'"


def test_search_won_logs_address_only(caplog):
    with caplog.at_level(logging.INFO, logger="vanity.search"):
        log_search_won("0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf", 12, 0.5)

    assert "0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf" in caplog.text
    assert "12 iterations" in caplog.text


def test_search_failed_logs_type_only(caplog):
    with caplog.at_level(logging.ERROR, logger="vanity.search"):
        log_search_failed(EntropyGenerationError("secure random source unavailable: OSError"))

    assert "EntropyGenerationError" in caplog.text
    assert "unavailable" not in caplog.text
