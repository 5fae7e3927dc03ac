"""
Tests for stdtx loggers
"""
import logging

from stdtx.core import get_logger
from stdtx.script import MultiSigRedeemScript
from tests.utility import GAVIN_REDEEM_SCRIPT


def test_get_logger_file_handler(tmp_path):
    log_file = tmp_path / "logs" / "stdtx.log"
    logger = get_logger("stdtx.tests.file_logger", "info", log_file)
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2

    logger.debug("not written")
    logger.info("written")
    for handler in logger.handlers:
        handler.flush()

    contents = log_file.read_text()
    assert "[stdtx.tests.file_logger] [INFO]: written" in contents
    assert "not written" not in contents

    # A second call keeps the existing handlers
    assert get_logger("stdtx.tests.file_logger", "DEBUG") is logger
    assert len(logger.handlers) == 2
    assert logger.level == logging.INFO

    for handler in logger.handlers:
        handler.close()


def test_redeem_script_parse_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="stdtx.script.redeem_script")
    MultiSigRedeemScript.from_bytes(GAVIN_REDEEM_SCRIPT)
    assert "Parsed 2-of-3 redeem script" in caplog.text
