import logging
from typing import Any

import wireup
from wireup import SyncContainer

from token_resolver import common, services
from token_resolver.config.config import config

logger = logging.getLogger(__name__)


def create_container(parameters: dict[str, Any] | None = None) -> SyncContainer:
    """Set up dependency injection for the resolver and its collaborators.

    Parameters come from config(), with any overrides given here taking precedence.
    """
    container_parameters = {**config(), **(parameters or {})}
    container = wireup.create_sync_container(service_modules=[common, services], parameters=container_parameters)

    logger.info("container ready", extra={"config": container_parameters})
    return container
