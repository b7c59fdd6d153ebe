import logging
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource, SERVICE_NAME, SERVICE_VERSION
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor  # type: ignore
from opentelemetry.instrumentation.redis import RedisInstrumentor  # type: ignore

from tasklist.config import Settings

logger = logging.getLogger(__name__)

# Health probes would otherwise dominate the traces.
EXCLUDED_URLS = "/health"


def setup_opentelemetry(settings: Settings, app: FastAPI) -> None:
    logger.info("Setting up instrumentation...")

    resource = Resource(
        attributes={
            SERVICE_NAME: settings.OTEL_SERVICE_NAME,
            SERVICE_VERSION: settings.TASKLIST_VERSION,
        }
    )
    trace_provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(trace_provider)
    trace_provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter()))

    FastAPIInstrumentor.instrument_app(app, excluded_urls=EXCLUDED_URLS)  # type: ignore
    logger.info("FastAPI instrumentation enabled, excluding %s", EXCLUDED_URLS)

    # Spans for every store call, covering the task documents and the index.
    RedisInstrumentor().instrument()
    logger.info("Redis instrumentation enabled.")
