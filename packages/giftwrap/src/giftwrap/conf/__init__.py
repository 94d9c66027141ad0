from .defaults import DEFAULTS
from .models import GiftWrapConfig
from .settings import Settings, coerce_bool

__all__ = ["DEFAULTS", "GiftWrapConfig", "Settings", "coerce_bool"]
