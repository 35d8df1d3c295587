import logging

import pytest

from gw2api.utils import get_logger, mask_token, setup_logging


class RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def gw2_logger():
    logger = logging.getLogger("gw2api")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestMaskToken:
    def test_masks_all_but_prefix(self):
        assert mask_token("ABCDEF12-3456") == "ABCD********"

    def test_missing_token(self):
        assert mask_token(None) == "<none>"
        assert mask_token("") == "<none>"

    def test_short_token_fully_masked(self):
        assert mask_token("abc") == "***"


class TestLoggers:
    def test_names_are_namespaced(self):
        assert get_logger().name == "gw2api"
        assert get_logger("infrastructure.api.client").name == "gw2api.infrastructure.api.client"
        assert get_logger("gw2api.core").name == "gw2api.core"

    def test_setup_logging_installs_one_handler(self, gw2_logger):
        first = RecordingHandler()
        second = RecordingHandler()

        setup_logging(logging.DEBUG, handler=first)
        setup_logging(logging.DEBUG, handler=second)

        assert first not in gw2_logger.handlers
        assert second in gw2_logger.handlers
        assert gw2_logger.level == logging.DEBUG

    def test_library_records_reach_handler(self, gw2_logger):
        handler = RecordingHandler()
        setup_logging(logging.DEBUG, handler=handler)

        get_logger("infrastructure.api.client").debug("GET /v2/build")

        assert [record.getMessage() for record in handler.records] == ["GET /v2/build"]
