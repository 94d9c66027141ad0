from .associations import Many, Single, classify_association
from .declarations import (
    Declarations,
    MemberKind,
    attribute,
    unwrapped,
    wrapped_association,
    wrapped_reference,
)
from .presenter import Presenter, PresenterMeta
from .serializers import JSONSerializerMixin

__all__ = [
    "Declarations",
    "JSONSerializerMixin",
    "MemberKind",
    "Many",
    "Presenter",
    "PresenterMeta",
    "Single",
    "attribute",
    "classify_association",
    "unwrapped",
    "wrapped_association",
    "wrapped_reference",
]
