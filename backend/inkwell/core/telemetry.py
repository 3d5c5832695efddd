"""
OpenTelemetry Setup

Instruments FastAPI and SQLAlchemy when ``telemetry_enabled`` is set:
- Request/response timing for all FastAPI routes
- Database query timing (SQLAlchemy)
- Request correlation via trace IDs (picked up by TelemetryFormatter)
"""
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from sqlalchemy.engine import Engine
from ..config import Settings
import logging

logger = logging.getLogger(__name__)


def setup_telemetry(app, settings: Settings, engine: Engine):
    """
    Setup OpenTelemetry instrumentation for FastAPI app

    Args:
        app: FastAPI application instance
        settings: Application settings
        engine: SQLAlchemy engine of the application database
    """
    resource = Resource.create({
        "service.name": "inkwell-api",
        "service.version": app.version,
        "service.namespace": "inkwell",
    })

    tracer_provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(tracer_provider)

    exporter_type = settings.telemetry_exporter.lower()
    if exporter_type == "console":
        tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        logger.info("Console exporter enabled")
    else:
        logger.warning(f"Unknown telemetry exporter '{exporter_type}', spans will not be exported")

    FastAPIInstrumentor.instrument_app(app, tracer_provider=tracer_provider)
    SQLAlchemyInstrumentor().instrument(engine=engine, tracer_provider=tracer_provider)

    logger.info("OpenTelemetry instrumentation enabled for requests and database queries")
    return tracer_provider


def get_tracer(name: str):
    """
    Get a tracer for custom spans

    Args:
        name: Name of the tracer (usually __name__)

    Returns:
        Tracer instance
    """
    return trace.get_tracer(name)
