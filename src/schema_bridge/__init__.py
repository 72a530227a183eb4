"""Schema Bridge - OpenAPI Schema Objects from validation schema descriptors.

Converts the introspected description of a runtime validation schema into an
OpenAPI 3 / JSON-Schema compatible Schema Object, so one schema serves both
value validation and API documentation.
"""

__version__ = "0.1.0"

from .config import Config
from .utils.log_setup import configure_default_logging
from .schema_gen.schema_converter_service import SchemaConverterService, to_openapi

configure_default_logging()

__all__ = ["Config", "SchemaConverterService", "to_openapi"]
