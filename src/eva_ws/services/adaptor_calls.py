"""Running blocking storage adaptor calls from async handlers."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import structlog

from eva_ws.adapters.base import QueryResult
from eva_ws.observability.metrics import record_adaptor_call
from eva_ws.utils.errors import CollaboratorError, EvaError

logger = structlog.get_logger(__name__)


async def call_adaptor(
    operation: str, func: Callable[..., QueryResult], *args: Any
) -> QueryResult:
    """Run ``func`` in a worker thread, wrapping failures in :class:`CollaboratorError`.

    The adaptor's message is passed through unchanged. Nothing is retried.
    """
    try:
        result = await asyncio.to_thread(func, *args)
    except EvaError:
        record_adaptor_call(operation, success=False)
        raise
    except Exception as exc:
        record_adaptor_call(operation, success=False)
        logger.error("adaptor.failure", operation=operation, error=str(exc))
        raise CollaboratorError(str(exc)) from exc
    record_adaptor_call(operation, success=True)
    return result


__all__ = ["call_adaptor"]
