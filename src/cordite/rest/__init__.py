from .interactions import Interactions
from .misc import Miscellaneous
from .manager import RESTManager
from .channels import Channels


__all__ = (
    'Channels',
    'Interactions',
    'Miscellaneous',
    'RESTManager',
)
