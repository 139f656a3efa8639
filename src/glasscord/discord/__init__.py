from .models import *
from .enums import *
from .types import *


__all__ = (
    # enums.py
    'AttachmentFlag',
    # models
    'Attachment',
    'AttachmentRecord',
    'DiscordEntity',
    'RawBaseModel',
    'filter_missing',
    # types.py
    'Snowflake',
)
