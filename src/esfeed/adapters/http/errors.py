"""HTTP adapter – map non-2xx responses onto the kernel error taxonomy."""
from __future__ import annotations

from esfeed.kernel.errors import (
    BadRequestError,
    BaseError,
    NotFoundError,
    TemporarilyUnavailableError,
    UnauthorizedError,
    UnexpectedResponseError,
)


def classify_status(status_code: int, url: str, method: str = "GET", reason: str = "") -> BaseError | None:
    """Return the error matching *status_code*, or ``None`` for 2xx."""
    if 200 <= status_code <= 299:
        return None
    message = f"{method} {url}: {status_code} {reason}".rstrip()
    detail = {"status_code": status_code, "url": url, "method": method}
    if status_code == 400:
        return BadRequestError(message, status_code=status_code, url=url, method=method, detail=detail)
    if status_code == 401:
        return UnauthorizedError(status_code=status_code, detail=detail)
    if status_code == 404:
        return NotFoundError("resource", url, status_code=status_code, detail=detail)
    if status_code == 503:
        return TemporarilyUnavailableError(message, status_code=status_code, url=url, method=method, detail=detail)
    return UnexpectedResponseError(message, status_code=status_code, url=url, method=method, detail=detail)


__all__ = ["classify_status"]
