"""Base class for Fanart.tv resource accessors."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fanart_tv.core.config import RequestOptions
    from fanart_tv.core.executor import RequestExecutor


def latest_path(prefix: str, date: str | None) -> str:
    """Build a ``latest`` endpoint path with an optional date segment."""
    if date:
        return f"{prefix}/latest/{date}"
    return f"{prefix}/latest"


class Resource:
    """Base class for resource accessors.

    Subclasses validate their arguments, build an endpoint path and hand it
    to the shared :class:`RequestExecutor`.

    Attributes:
        name: Resource name used in paths and log messages
    """

    name: str = "base"

    def __init__(self, executor: "RequestExecutor") -> None:
        self._executor = executor

    @property
    def executor(self) -> "RequestExecutor":
        return self._executor

    async def _request(self, path: str, options: "RequestOptions | None" = None) -> Any:
        return await self._executor.get(path, options)
