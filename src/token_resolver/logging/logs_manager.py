import logging
from collections.abc import Generator, Sequence
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from pythonjsonlogger.json import JsonFormatter

from token_resolver.config.config import LOG_LEVEL

test_id_context_var: ContextVar[str | None] = ContextVar("test_id", default=None)

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s %(module)s.py:%(funcName)s():%(lineno)d %(message)s"


@contextmanager
def bind_test_id_to_logger(test_id: str) -> Generator[None]:
    token = test_id_context_var.set(test_id)
    try:
        yield
    finally:
        test_id_context_var.reset(token)


class EnrichedJsonFormatter(JsonFormatter):
    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        log_record["test_id"] = test_id_context_var.get() or "-"
        super().add_fields(log_record, record, message_dict)


def init_logging(quieten: Sequence[str] = ("faker",)) -> None:
    formatter = EnrichedJsonFormatter(LOG_FORMAT)
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    logging.root.handlers = []  # Remove default handlers
    logging.root.setLevel(LOG_LEVEL)
    logging.root.addHandler(handler)

    for q in quieten:
        logging.getLogger(q).setLevel(logging.WARNING)
