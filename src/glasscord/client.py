from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from .discord.models.attachment import AttachmentRecord
from .http import ResourceFetcher

if TYPE_CHECKING:
    from collections.abc import Iterable
    from types import TracebackType


__all__ = (
    'Client',
)


class Client:
    """the api context entities are bound to"""

    def __init__(
        self,
        fetcher: ResourceFetcher | None = None
    ) -> None:
        self._fetcher = fetcher or ResourceFetcher()

    @property
    def fetcher(self) -> ResourceFetcher:
        return self._fetcher

    def attachment(self, data: dict[str, Any]) -> AttachmentRecord:
        return AttachmentRecord.from_payload(self, data)

    def attachments(
        self,
        data: Iterable[dict[str, Any]]
    ) -> list[AttachmentRecord]:
        return [
            self.attachment(attachment)
            for attachment in data
        ]

    async def close(self) -> None:
        await self._fetcher.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None
    ) -> None:
        await self.close()
