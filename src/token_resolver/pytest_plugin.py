"""pytest fixtures for resolving test data placeholders.

Installed through the ``pytest11`` entry point, so any suite that depends on
this package can write::

    def test_register(data_value):
        first_name = data_value("<FIRSTNAME>")
        password = f"Test{data_value('<UNIQUEID6>')}!"
"""

import logging
from collections.abc import Callable, Generator

import pytest

from token_resolver.data_value import default_resolver
from token_resolver.logging.logs_manager import bind_test_id_to_logger, init_logging
from token_resolver.services.token_resolver import TokenResolver

logger = logging.getLogger(__name__)


def pytest_addoption(parser: pytest.Parser) -> None:
    help_text = "replace the root log handlers with token_resolver's JSON handler"
    parser.addoption("--token-resolver-json-logs", action="store_true", default=False, help=help_text)
    parser.addini("token_resolver_json_logs", type="bool", default=False, help=help_text)


def pytest_configure(config: pytest.Config) -> None:
    if config.getoption("token_resolver_json_logs") or config.getini("token_resolver_json_logs"):
        init_logging()


@pytest.fixture
def token_resolver() -> TokenResolver:
    return default_resolver()


@pytest.fixture
def data_value(token_resolver: TokenResolver) -> Callable[[str | None], str | None]:
    return token_resolver.resolve


@pytest.fixture(autouse=True)
def report_test(request: pytest.FixtureRequest) -> Generator[None]:
    with bind_test_id_to_logger(request.node.nodeid):
        logger.info("test started")
        yield
        logger.info("test finished")
