"""Cloud function entry point.

The runtime calls ``lambda_handler(event, context)`` with the decoded JSON
input ``{"StartDate": ..., "EndDate": ...}`` and serializes the returned dict.
"""

import asyncio
import logging
from typing import Any

from salesreport.container import Container
from salesreport.domain.models import ReportRequest

logger = logging.getLogger(__name__)

# Reused across warm invocations
_container: Container | None = None


def get_container() -> Container:
    global _container
    if _container is None:
        _container = Container()
        logging.getLogger().setLevel(_container.settings().log_level)
    return _container


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, str]:
    request = ReportRequest.model_validate(event)
    handler = get_container().handler()
    result = asyncio.run(handler.handle(request))
    return result.model_dump(by_alias=True)
