import logging
import sys
from opentelemetry import trace
from ..config import Settings


class TelemetryFormatter(logging.Formatter):
    """
    Formatter that appends the OpenTelemetry trace ID when a span is recording
    
    This allows correlating logs with traces for easier debugging.
    """
    
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._original_fmt = self._style._fmt
    
    def format(self, record):
        trace_id = None
        span = trace.get_current_span()
        if span and span.is_recording():
            span_context = span.get_span_context()
            if span_context and span_context.trace_id:
                # First 16 of the 32 hex chars, for readability
                trace_id = format(span_context.trace_id, '032x')[:16]
        
        if trace_id:
            record.trace_id = trace_id
            self._style._fmt = f"{self._original_fmt} [trace_id=%(trace_id)s]"
        else:
            self._style._fmt = self._original_fmt
        
        return super().format(record)


def setup_logging(settings: Settings):
    """Configure logging for the application"""
    log_level = (settings.log_level or "INFO").upper()
    
    handler = logging.StreamHandler(sys.stdout)
    formatter = TelemetryFormatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    handler.setFormatter(formatter)
    
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        handlers=[handler]
    )
    
    # Set specific log levels for noisy libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    
    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured with level: {log_level}")
