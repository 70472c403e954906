"""Failure translation shared by the store actions."""

from __future__ import annotations

import logging

from adminstore.exceptions import AdminPayloadError, AdminTransportError
from adminstore.models.results import ErrorKind, LoadResult

_logger = logging.getLogger(__name__)

#: Failures an action handles with its resource's error policy. Anything
#: else (including misuse of the client) propagates to the caller.
LOAD_ERRORS: tuple[type[Exception], ...] = (AdminTransportError, AdminPayloadError)


def describe_failure(exc: Exception, prefix: str) -> tuple[ErrorKind, str]:
    """Classify a handled failure and build its human-readable message."""
    if isinstance(exc, AdminTransportError):
        if exc.status_code is not None:
            return ErrorKind.HTTP_STATUS, f"{prefix}: {exc.reason or exc.status_code}"
        return ErrorKind.NETWORK, f"{prefix}: {exc}"
    if isinstance(exc, AdminPayloadError):
        return ErrorKind.INVALID_PAYLOAD, f"{prefix}: {exc}"
    return ErrorKind.NETWORK, f"{prefix}: {exc or type(exc).__name__}"


def stale_result(resource: str, generation: int) -> LoadResult:
    """Result for a response that resolved after a newer load of *resource* started."""
    _logger.debug("Discarding stale response for %s (generation=%d)", resource, generation)
    return LoadResult.failure(resource, ErrorKind.STALE, f"{resource} was superseded by a newer load")
