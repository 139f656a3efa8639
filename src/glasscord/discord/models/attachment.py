from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any, ClassVar, Protocol, runtime_checkable
from base64 import b64decode, b64encode
from io import BytesIO

from annotated_types import Ge, Gt
from pydantic import AnyUrl
from orjson import dumps, loads
import logfire

from glasscord.missing import MISSING, Optional, is_not_missing
from glasscord.errors import InvalidStateError
from glasscord.discord.enums import AttachmentFlag
from glasscord.discord.types import Snowflake
from glasscord.http import Asset, File
from glasscord.utils import try_parse_url

from .base import DiscordEntity

if TYPE_CHECKING:
    from collections.abc import Coroutine
    from contextlib import AbstractAsyncContextManager
    from typing import Self

    from aiohttp import StreamReader
    from PIL.Image import Image

    from glasscord.client import Client
    from glasscord.http import ResourceFetcher


__all__ = (
    'Attachment',
    'AttachmentRecord',
)


@runtime_checkable
class Attachment(Protocol):
    """a file attached to a message"""

    @property
    def id(self) -> Snowflake: ...
    @property
    def api(self) -> Client: ...
    @property
    def filename(self) -> str: ...
    @property
    def description(self) -> Optional[str]: ...
    @property
    def size(self) -> int: ...
    @property
    def parsed_url(self) -> AnyUrl | None: ...
    @property
    def parsed_proxy_url(self) -> AnyUrl | None: ...
    @property
    def is_image(self) -> bool: ...
    @property
    def height(self) -> Optional[int]: ...
    @property
    def width(self) -> Optional[int]: ...
    @property
    def ephemeral(self) -> Optional[bool]: ...
    @property
    def duration_secs(self) -> Optional[float]: ...
    @property
    def waveform(self) -> Optional[str]: ...
    @property
    def waveform_bytes(self) -> Optional[bytes]: ...
    @property
    def flags(self) -> Optional[AttachmentFlag]: ...
    @property
    def spoiler(self) -> bool: ...

    def open(self) -> AbstractAsyncContextManager[StreamReader]: ...

    async def read(self, limit: int | None = None) -> bytes: ...

    def to_image(
        self,
        limit: int | None = None
    ) -> Coroutine[Any, Any, Image]: ...


class AttachmentRecord(DiscordEntity):
    id: Snowflake
    """attachment id"""
    filename: str
    """name of file attached"""
    description: Optional[str] = MISSING
    """description for the file (max 1024 characters)"""
    content_type: Optional[str] = MISSING
    """the attachment's media type"""
    size: Annotated[int, Ge(0)]
    """size of file in bytes"""
    url: str
    """source url of file"""
    proxy_url: str
    """a proxied url of file"""
    height: Optional[Annotated[int, Gt(0)]] = MISSING
    """height of file (if image)"""
    width: Optional[Annotated[int, Gt(0)]] = MISSING
    """width of file (if image)"""
    ephemeral: Optional[bool] = MISSING
    """whether this attachment is ephemeral\n\nEphemeral attachments will automatically be removed after a set period of time. Ephemeral attachments on messages are guaranteed to be available as long as the message itself exists."""
    duration_secs: Optional[Annotated[float, Ge(0)]] = MISSING
    """the duration of the audio file (currently for voice messages)"""
    waveform: Optional[str] = MISSING
    """base64 encoded bytearray representing a sampled waveform (currently for voice messages)"""
    flags: Optional[AttachmentFlag] = MISSING
    """attachment flags combined as a bitfield* (AttachmentFlag enum)"""

    # ? flags, duration_secs, and waveform are never sent back to discord
    PAYLOAD_FIELDS: ClassVar[tuple[str, ...]] = (
        'id',
        'filename',
        'description',
        'size',
        'url',
        'proxy_url',
        'height',
        'width',
        'ephemeral',
    )

    @classmethod
    def from_json(
        cls,
        api: Client | None,
        data: str | bytes
    ) -> Self:
        return cls.from_payload(api, loads(data))

    @property
    def is_image(self) -> bool:
        return is_not_missing(self.height)

    @property
    def spoiler(self) -> bool:
        return self.filename.startswith('SPOILER_')

    @property
    def parsed_url(self) -> AnyUrl | None:
        return self._parse_url('url', self.url)

    @property
    def parsed_proxy_url(self) -> AnyUrl | None:
        return self._parse_url('proxy_url', self.proxy_url)

    @property
    def waveform_bytes(self) -> Optional[bytes]:
        if not is_not_missing(self.waveform):
            return MISSING

        return b64decode(self.waveform)

    def _parse_url(self, field: str, value: str) -> AnyUrl | None:
        url = try_parse_url(value)

        if url is None:
            logfire.warn(
                'malformed {field} on attachment {attachment_id}',
                field=field,
                attachment_id=int(self.id),
                value=value
            )

        return url

    @property
    def _fetcher(self) -> ResourceFetcher:
        return self.api.fetcher

    def open(self) -> AbstractAsyncContextManager[StreamReader]:
        return self._fetcher.open(Asset(self.url))

    async def read(self, limit: int | None = None) -> bytes:
        return await self._fetcher.read(Asset(self.url), limit)

    def to_image(
        self,
        limit: int | None = None
    ) -> Coroutine[Any, Any, Image]:
        # ? raised here rather than in a coroutine so it fails before any io
        if not self.is_image:
            raise InvalidStateError(
                f'attachment `{self.filename}` is not an image'
            )

        return self._fetcher.read_image(Asset(self.url), limit)

    async def to_file(self, limit: int | None = None) -> File:
        return File(
            BytesIO(await self.read(limit)),
            filename=self.filename,
            description=self.description or None,
            spoiler=self.spoiler,
            duration_secs=(
                self.duration_secs
                if is_not_missing(self.duration_secs)
                else None),
            waveform=self.waveform or None
        )

    async def to_image_data(self, limit: int | None = None) -> str:
        content_type = self.content_type or 'application/octet-stream'

        return (
            f'data:{content_type};base64,'
            f'{b64encode(await self.read(limit)).decode('ascii')}'
        )

    def as_payload(self) -> dict[str, Any]:  # type: ignore[override]
        return super().as_payload(self.PAYLOAD_FIELDS)

    def as_json(self) -> bytes:
        return dumps(self.as_payload())

    def __str__(self) -> str:
        return f'Attachment (file name: {self.filename}, url: {self.url})'
