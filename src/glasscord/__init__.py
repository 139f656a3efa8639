from .discord import Attachment, AttachmentFlag, AttachmentRecord, Snowflake
from .missing import MISSING, is_not_missing
from .http import Asset, File, ResourceFetcher
from .telemetry import init_logfire
from .version import VERSION
from .client import Client
from .errors import *


__version__ = VERSION

__all__ = (
    'MISSING',
    'VERSION',
    'Asset',
    'Attachment',
    'AttachmentFlag',
    'AttachmentRecord',
    'BaseGlasscordException',
    'Client',
    'ConversionError',
    'File',
    'FileLimitExceeded',
    'Forbidden',
    'HTTPException',
    'InvalidStateError',
    'NotFound',
    'ResourceFetcher',
    'ServerError',
    'Snowflake',
    'Unauthorized',
    'init_logfire',
    'is_not_missing',
)
