from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

import pytest

from glasscord import Client
from glasscord.http import Asset

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


class FakeFetcher:
    def __init__(self, data: bytes = b'file contents') -> None:
        self.data = data
        self.calls: list[tuple[str, Asset, int | None]] = []
        self.closed = False

    @asynccontextmanager
    async def open(self, asset: Asset) -> AsyncIterator[bytes]:
        self.calls.append(('open', asset, None))
        yield self.data

    async def read(self, asset: Asset, limit: int | None = None) -> bytes:
        self.calls.append(('read', asset, limit))
        return self.data

    async def read_image(self, asset: Asset, limit: int | None = None) -> str:
        self.calls.append(('read_image', asset, limit))
        return 'image'

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def client(fetcher: FakeFetcher) -> Client:
    return Client(fetcher)  # type: ignore[arg-type]


@pytest.fixture
def payload() -> dict[str, Any]:
    return {
        'id': '1',
        'filename': 'SPOILER_cat.png',
        'size': 100,
        'url': 'https://x/cat.png',
        'proxy_url': 'https://x/p/cat.png',
        'height': 10,
        'width': 20,
    }


@pytest.fixture
def voice_payload() -> dict[str, Any]:
    return {
        'id': '1183483940258385930',
        'filename': 'voice-message.ogg',
        'content_type': 'audio/ogg',
        'size': 8294,
        'url': 'https://cdn.discordapp.com/attachments/1/2/voice-message.ogg',
        'proxy_url': 'https://media.discordapp.net/attachments/1/2/voice-message.ogg',
        'duration_secs': 2.5,
        'waveform': 'AAECAwQFBgcICQ==',
        'flags': 4,
        'ephemeral': False,
    }
