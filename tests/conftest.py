from random import randrange

import pytest

from inline_builder.config import Logging, MultiFileLoader
from tests.mocks.core import Bar, FooBar
from tests.utils import path_root, random_str


# noinspection PyUnusedLocal
@pytest.hookimpl
def pytest_configure(config: pytest.Config):
    """Loads logging config"""
    config_file = path_root.joinpath("logging.yml")
    if not config_file.is_file():
        return

    log_config = Logging(**MultiFileLoader.load(config_file), name="test")
    log_config.configure_logging()


@pytest.fixture
def foobar() -> FooBar:
    return FooBar()


@pytest.fixture
def bar() -> Bar:
    return Bar(id=randrange(1, 100), tags=[random_str(5, 10) for _ in range(randrange(1, 5))])

