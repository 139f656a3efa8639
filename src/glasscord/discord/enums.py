from enum import IntFlag


__all__ = (
    'AttachmentFlag',
)


class AttachmentFlag(IntFlag):
    NONE = 0
    IS_CLIP = 1 << 0
    """This attachment is a clipped recording of a stream"""
    IS_THUMBNAIL = 1 << 1
    """This attachment is a thumbnail"""
    IS_REMIX = 1 << 2
    """This attachment has been remixed"""
    IS_SPOILER = 1 << 3
    """This attachment is a spoiler"""
    CONTAINS_EXPLICIT_MEDIA = 1 << 4
    """This attachment was flagged as sensitive content"""
    IS_ANIMATED = 1 << 5
    """This attachment is an animated image"""
