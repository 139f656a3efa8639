from .attachment import *
from .base import *


__all__ = (
    # attachment.py
    'Attachment',
    'AttachmentRecord',
    # base.py
    'DiscordEntity',
    'RawBaseModel',
    'filter_missing',
)
