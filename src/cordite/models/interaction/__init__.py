from .data import (
    UnknownComponentInteractionData,
    SelectMenuInteractionData,
    ComponentInteractionData,
    ButtonInteractionData,
    ResolvedData,
    build_resolved
)
from .values import SelectMenuValuesWrapper
from .component import ComponentInteraction
from .base import Interaction


__all__ = (
    'ButtonInteractionData',
    'ComponentInteraction',
    'ComponentInteractionData',
    'Interaction',
    'ResolvedData',
    'SelectMenuInteractionData',
    'SelectMenuValuesWrapper',
    'UnknownComponentInteractionData',
    'build_resolved',
)
