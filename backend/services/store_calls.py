import asyncio
import logging
from typing import Any, Callable, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from errors import StoreError

logger = logging.getLogger("pedidos-api")

T = TypeVar("T")


async def call_store(message: str, func: Callable[..., T], *args: Any) -> T:
    """Run a blocking repository call off the event loop.

    Store failures are logged with their cause and re-raised as ``StoreError``
    carrying only ``message``.
    """
    try:
        return await asyncio.to_thread(func, *args)
    except (SQLAlchemyError, StoreError) as exc:
        logger.exception("%s: %s", message, exc)
        raise StoreError(message) from exc
