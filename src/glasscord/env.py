from typing import Self
from os import environ

from pydantic import BaseModel, NonNegativeInt, PositiveFloat

from .version import USER_AGENT


__all__ = (
    'Env',
    'env',
)


class Env(BaseModel):
    max_download_size: NonNegativeInt
    """largest response body a download will buffer, 0 for no limit"""
    request_timeout: PositiveFloat
    user_agent: str
    logfire_token: str
    dev: bool

    @classmethod
    def new(cls) -> Self:
        return cls.model_validate({
            'max_download_size': environ.get(
                'GLASSCORD_MAX_DOWNLOAD_SIZE', 25 * 1024 * 1024),
            'request_timeout': environ.get(
                'GLASSCORD_REQUEST_TIMEOUT', 30.0),
            'user_agent': environ.get('GLASSCORD_USER_AGENT', USER_AGENT),
            'logfire_token': environ.get('LOGFIRE_TOKEN', ''),
            'dev': environ.get('DEV', '1') != '0'
        })

    @property
    def download_limit(self) -> int | None:
        return self.max_download_size or None


env = Env.new()
