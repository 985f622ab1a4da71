from .base import RawBaseModel


__all__ = (
    'VoiceRegion',
)


class VoiceRegion(RawBaseModel):
    id: str
    """unique id for the region"""
    name: str
    """name of the region"""
    optimal: bool
    """true for a single server that is closest to the current user's client"""
    deprecated: bool
    """whether this is a deprecated voice region (avoid switching to these)"""
    custom: bool
    """whether this is a custom voice region (used for events/etc)"""
