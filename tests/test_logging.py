import logging

import pytest

from secret_finder.utils import logging as sf_logging


@pytest.fixture
def package_logger():
    root = logging.getLogger(sf_logging.ROOT_LOGGER)
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    sf_logging._cli_handler = None


def test_import_installs_only_null_handler(package_logger):
    assert all(isinstance(h, logging.NullHandler) for h in package_logger.handlers)
    assert package_logger.propagate is True


def test_records_reach_application_handlers_once(package_logger, caplog):
    with caplog.at_level(logging.WARNING, logger=sf_logging.ROOT_LOGGER):
        sf_logging.get_logger("test").warning("single record")
    assert [r.getMessage() for r in caplog.records] == ["single record"]


def test_configure_adds_one_stream_handler(package_logger):
    sf_logging.configure("DEBUG")
    sf_logging.configure("INFO")
    streams = [h for h in package_logger.handlers if type(h) is logging.StreamHandler]
    assert len(streams) == 1
    assert package_logger.level == logging.INFO
