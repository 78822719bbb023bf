import logging

import pytest

from calfields import MonthDay


@pytest.fixture
def md_07_15():
    return MonthDay.of(7, 15)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """The CLI detaches the package logger from root; put it back after each test."""
    yield
    lg = logging.getLogger("calfields")
    lg.handlers.clear()
    lg.setLevel(logging.NOTSET)
    lg.propagate = True
