"""Mini README: Request interceptors for the Coffer web interface.

Structure:
    * build_inventory_interceptor - factory returning an HTTP middleware that
      logs each request around handling and reports the inventory size.

The interceptor runs for every route, before and after the handler, and
never alters the handler's response body.
"""

from __future__ import annotations

import time
from typing import Awaitable, Callable

from fastapi import Request, Response

from ..inventory import InventoryStore
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

INVENTORY_SIZE_HEADER = "X-Inventory-Items"

CallNext = Callable[[Request], Awaitable[Response]]


def build_inventory_interceptor(
    inventory: InventoryStore,
) -> Callable[[Request, CallNext], Awaitable[Response]]:
    """Create middleware bound to ``inventory``."""

    async def inventory_interceptor(request: Request, call_next: CallNext) -> Response:
        LOGGER.info("Handling %s %s", request.method, request.url.path)
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        response.headers[INVENTORY_SIZE_HEADER] = str(inventory.count())
        LOGGER.info(
            "Completed %s %s -> %s in %.2f ms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    return inventory_interceptor
