"""Infrastructure fixtures — restore root logger state after each test."""

import logging

import pytest


@pytest.fixture
def clean_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield logging.root
    for handler in list(logging.root.handlers):
        if handler not in handlers:
            logging.root.removeHandler(handler)
            handler.close()
    logging.root.setLevel(level)
