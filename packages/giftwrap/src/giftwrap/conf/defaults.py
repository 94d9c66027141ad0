"""Default configuration values for giftwrap."""

DEFAULTS: dict[str, object] = {
    # Mix JSONSerializerMixin into presenter classes defined while enabled.
    "USE_SERIALIZERS": True,
}
