from htmx_todo.infrastructure.observability.logging.schema_processor import (
    event_schema_processor,
)

__all__ = ["event_schema_processor"]
