import logging

from lambdautils.logger.logger import logger, setup_logger


def stream_handlers(log):
    return [h for h in log.handlers if type(h) is logging.StreamHandler]


def test_default_logger():
    assert logger.name == "lambdautils"
    assert logger.propagate is False
    assert len(stream_handlers(logger)) == 1


def test_setup_logger_attaches_single_stream_handler():
    log = setup_logger("lambdautils.test_fresh")

    assert log.propagate is False
    assert len(stream_handlers(log)) == 1


def test_setup_logger_level_and_idempotence():
    first = setup_logger("lambdautils.test_custom", level="debug")
    second = setup_logger("lambdautils.test_custom", level="error")

    assert first is second
    assert len(stream_handlers(first)) == 1
    # The second call leaves the existing configuration in place
    assert first.level == logging.DEBUG
