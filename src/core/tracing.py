"""
Glossary-Term-Service - OpenTelemetry Tracing

The engine wraps each entry point (terms.query, terms.detail, terms.random,
catalog.stats) in a span. Until configure_tracing() installs an SDK
provider those spans come from the API's no-op tracer.
"""

from typing import Any

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor

SERVICE_NAME = "glossary-term-service"

_configured: bool = False


def configure_tracing(
    service_name: str = SERVICE_NAME,
    service_version: str = "0.1.0",
    console_export: bool = True,
) -> None:
    """Install a TracerProvider tagged with the service name and version.

    Called from the lifespan when GLS_TRACING_ENABLED is set. Repeat calls
    are ignored.

    Args:
        service_name: Value of the ``service.name`` resource attribute.
        service_version: Value of the ``service.version`` resource attribute.
        console_export: Print finished spans to stdout.
    """
    global _configured

    if _configured:
        return

    provider = TracerProvider(
        resource=Resource.create(
            {"service.name": service_name, "service.version": service_version}
        )
    )
    if console_export:
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    _configured = True


def get_tracer(name: str) -> Any:
    return trace.get_tracer(name)


def reset_tracing() -> None:
    """Forget the one-time flag so tests can configure again."""
    global _configured
    _configured = False
