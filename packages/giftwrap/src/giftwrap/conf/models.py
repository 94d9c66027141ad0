# giftwrap/conf/models.py

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict


class GiftWrapConfig(BaseModel):
    """Settings read by presenter classes at definition time.

    Instances are immutable; use ``model_copy(update=...)`` or
    :func:`giftwrap.configure` to derive a changed configuration.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    use_serializers: bool = True

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "GiftWrapConfig":
        """Build from an uppercase settings mapping (``{"USE_SERIALIZERS": ...}``)."""
        fields = {
            name: settings[name.upper()]
            for name in cls.model_fields
            if name.upper() in settings
        }
        return cls.model_validate(fields)
