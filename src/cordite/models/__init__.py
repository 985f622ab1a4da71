from .channel import (
    AnnouncementThreadChannel,
    InteractionResolvedChannel,
    PrivateThreadMetadata,
    PrivateThreadChannel,
    PublicThreadChannel,
    AnnouncementChannel,
    CategoryChannel,
    ThreadMetadata,
    PrivateChannel,
    ThreadChannel,
    GuildChannel,
    ForumChannel,
    GroupChannel,
    StageChannel,
    VoiceChannel,
    TextChannel,
    Overwrite,
    Channel
)
from .interaction import (
    UnknownComponentInteractionData,
    SelectMenuInteractionData,
    SelectMenuValuesWrapper,
    ButtonInteractionData,
    ComponentInteraction,
    ResolvedData,
    Interaction,
    build_resolved
)
from .application import Application, ClientApplication
from .base import Base, RawBaseModel
from .sticker import Sticker, StickerPack
from .voice import VoiceRegion
from .message import Message
from .member import Member
from .guild import Guild
from .role import Role
from .user import User


__all__ = (
    'AnnouncementChannel',
    'AnnouncementThreadChannel',
    'Application',
    'Base',
    'ButtonInteractionData',
    'CategoryChannel',
    'Channel',
    'ClientApplication',
    'ComponentInteraction',
    'ForumChannel',
    'GroupChannel',
    'Guild',
    'GuildChannel',
    'Interaction',
    'InteractionResolvedChannel',
    'Member',
    'Message',
    'Overwrite',
    'PrivateChannel',
    'PrivateThreadChannel',
    'PrivateThreadMetadata',
    'PublicThreadChannel',
    'RawBaseModel',
    'ResolvedData',
    'Role',
    'SelectMenuInteractionData',
    'SelectMenuValuesWrapper',
    'StageChannel',
    'Sticker',
    'StickerPack',
    'TextChannel',
    'ThreadChannel',
    'ThreadMetadata',
    'UnknownComponentInteractionData',
    'User',
    'VoiceChannel',
    'VoiceRegion',
    'build_resolved',
)
