# The MIT License (MIT)

# Copyright (c) 2015-2021 Rapptz
# Copyright (c) 2021-present Pycord Development

# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:

# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.

# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS
# OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER
# DEALINGS IN THE SOFTWARE.
# ? the File class is adapted from py-cord
from __future__ import annotations

from contextlib import asynccontextmanager
from urllib.parse import urlsplit, unquote
from typing import TYPE_CHECKING, Any
from dataclasses import dataclass
from asyncio import to_thread
from io import BytesIO

from aiohttp import ClientError, ClientResponse, ClientSession, ClientTimeout
from PIL.Image import Image, open as pil_open
from PIL import UnidentifiedImageError
import logfire

from .errors import (
    ConversionError,
    FileLimitExceeded,
    Forbidden,
    HTTPException,
    NotFound,
    ServerError,
    Unauthorized
)
from .env import env

if TYPE_CHECKING:
    from collections.abc import AsyncIterator
    from io import BufferedIOBase

    from aiohttp import StreamReader


__all__ = (
    'Asset',
    'File',
    'ResourceFetcher',
)


CHUNK_SIZE = 16384


@dataclass(frozen=True, slots=True)
class Asset:
    """a single file request, scoped to one url"""
    url: str

    @property
    def filename(self) -> str:
        return unquote(urlsplit(self.url).path.rsplit('/', 1)[-1])


def _raise_for_status(response: ClientResponse, asset: Asset) -> None:
    match response.status:
        case 200:
            return
        case 401:
            raise Unauthorized(f'unauthorized to fetch {asset.filename}')
        case 403:
            raise Forbidden(f'cannot retrieve {asset.filename}')
        case 404:
            raise NotFound(f'{asset.filename} not found')
        case status if status >= 500:
            raise ServerError(
                f'cdn failed to serve {asset.filename}',
                status_code=status)
        case status:
            raise HTTPException(
                f'failed to get {asset.filename}',
                status_code=status)


def _decode_image(data: bytes) -> Image:
    image = pil_open(BytesIO(data))
    image.load()

    return image


class ResourceFetcher:
    """downloads files from the discord cdn

    owns its aiohttp session unless one is given, the session is created on
    first use so that it binds to the running event loop
    """

    def __init__(
        self,
        session: ClientSession | None = None,
        *,
        max_size: int | None = env.download_limit,
        timeout: float = env.request_timeout
    ) -> None:
        self._session = session
        self._owns_session = session is None
        self.max_size = max_size
        self.timeout = timeout

    @property
    def session(self) -> ClientSession:
        if self._session is None or self._session.closed:
            self._session = ClientSession(
                headers={'User-Agent': env.user_agent},
                timeout=ClientTimeout(total=self.timeout)
            )
            self._owns_session = True

        return self._session

    async def close(self) -> None:
        if (
            self._owns_session and
            self._session is not None and
            not self._session.closed
        ):
            await self._session.close()

    @asynccontextmanager
    async def _get(self, asset: Asset) -> AsyncIterator[ClientResponse]:
        try:
            async with self.session.get(asset.url) as response:
                _raise_for_status(response, asset)
                yield response
        except (ClientError, TimeoutError) as e:
            logfire.debug(
                'failed to fetch {url}',
                url=asset.url,
                _exc_info=e)
            raise HTTPException(
                f'failed to fetch {asset.filename}: {e}'
            ) from e

    @asynccontextmanager
    async def open(self, asset: Asset) -> AsyncIterator[StreamReader]:
        async with self._get(asset) as response:
            yield response.content

    async def read(
        self,
        asset: Asset,
        limit: int | None = None
    ) -> bytes:
        limit = limit if limit is not None else self.max_size

        async with self._get(asset) as response:
            if limit is None:
                return await response.read()

            if (
                response.content_length is not None and
                response.content_length > limit
            ):
                raise FileLimitExceeded(f'{asset.filename} too large')

            data = bytearray()

            async for chunk in response.content.iter_chunked(CHUNK_SIZE):
                data.extend(chunk)

                if len(data) > limit:
                    raise FileLimitExceeded(f'{asset.filename} too large')

        return bytes(data)

    async def read_image(
        self,
        asset: Asset,
        limit: int | None = None
    ) -> Image:
        data = await self.read(asset, limit)

        try:
            return await to_thread(_decode_image, data)
        except (UnidentifiedImageError, OSError) as e:
            raise ConversionError(
                f'{asset.filename} is not a readable image'
            ) from e


class File:
    def __init__(
        self,
        data: BufferedIOBase | BytesIO,
        filename: str | None = None,
        description: str | None = None,
        spoiler: bool = False,
        duration_secs: float | None = None,
        waveform: str | None = None,
    ) -> None:
        self.data = data
        self.filename = filename
        self.duration_secs = duration_secs
        self.waveform = waveform

        if (
            spoiler
            and self.filename is not None
            and not self.filename.startswith('SPOILER_')
        ):
            self.filename = f'SPOILER_{self.filename}'

        self.spoiler = spoiler or (
            self.filename is not None and self.filename.startswith('SPOILER_')
        )
        self.description = description

    @property
    def is_voice_message(self) -> bool:
        return self.duration_secs is not None and self.waveform is not None

    def as_payload(self, index: int) -> dict[str, Any]:
        payload: dict[str, Any] = {
            'id': index,
            'filename': self.filename,
        }

        if self.description is not None:
            payload['description'] = self.description

        if self.is_voice_message:
            payload['duration_secs'] = self.duration_secs
            payload['waveform'] = self.waveform

        return payload

    def as_form_dict(self, index: int) -> dict[str, Any]:
        return {
            'name': f'files[{index}]',
            'value': self.data,
            'filename': self.filename,
            'content_type': (
                'audio/ogg'
                if self.is_voice_message else
                'application/octet-stream'
            ),
        }
