"""
Tests for the JSON log formatter and root logger setup.
"""

import json
import logging
import sys

import pytest

from campaign_vouchers.logging_config import JSONFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


def _record(**extra):
    return logging.getLogger("campaign_vouchers.test").makeRecord(
        "campaign_vouchers.test", logging.INFO, __file__, 1, "vouchers %s", ("released",), None, extra=extra
    )


def test_formats_message_and_extra_fields():
    payload = json.loads(JSONFormatter().format(_record(campaign_id="c1", released=3)))

    assert payload["message"] == "vouchers released"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "campaign_vouchers.test"
    assert payload["campaign_id"] == "c1"
    assert payload["released"] == 3
    assert "timestamp" in payload


def test_includes_exception_text():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.getLogger("x").makeRecord(
            "x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
        )

    payload = json.loads(JSONFormatter().format(record))
    assert "RuntimeError: boom" in payload["exception"]


def test_setup_logging_installs_json_handler(restore_root_logger):
    setup_logging("debug")

    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)
