# giftwrap/tracing/tracing.py
"""OpenTelemetry spans around presenter class definition.

Only ``opentelemetry-api`` is required. Without an SDK configured by the
application, the global tracer is a no-op and spans cost next to nothing.
"""

from collections.abc import Mapping, Sequence
from contextlib import contextmanager
from typing import Any, Iterator

from opentelemetry import trace
from opentelemetry.trace import Span, SpanKind, Status, StatusCode, Tracer

TRACER_NAME = "giftwrap"

# Attribute value types accepted by OpenTelemetry (alone or in homogeneous sequences).
_SCALARS = (bool, str, bytes, int, float)


def get_tracer(name: str | None = None) -> Tracer:
    return trace.get_tracer(name or TRACER_NAME)


def _span_attributes(attrs: Mapping[str, Any] | None) -> dict[str, Any]:
    cleaned: dict[str, Any] = {}
    for key, value in (attrs or {}).items():
        if isinstance(value, _SCALARS):
            cleaned[key] = value
        elif isinstance(value, Sequence):
            items = [item for item in value if isinstance(item, _SCALARS)]
            if items:
                cleaned[key] = items
    return cleaned


@contextmanager
def service_span_sync(name: str, *, attributes: Mapping[str, Any] | None = None) -> Iterator[Span]:
    """Run the block inside an internal span; failures mark the span as errored and re-raise.

    Usage:
        with service_span_sync("giftwrap.presenter.define", attributes={"giftwrap.class": fqcn}):
            ...
    """
    with get_tracer().start_as_current_span(
        name,
        kind=SpanKind.INTERNAL,
        attributes=_span_attributes(attributes),
        record_exception=False,
        set_status_on_exception=False,
    ) as span:
        try:
            yield span
        except Exception as exc:
            span.record_exception(exc)
            span.set_status(Status(StatusCode.ERROR, description=str(exc)))
            span.set_attribute("ok", False)
            raise
        span.set_attribute("ok", True)


__all__ = ["get_tracer", "service_span_sync"]
