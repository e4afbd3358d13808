"""Database API module."""

from .._output_schemas.database import DatabaseCheckOutput

__all__ = ["DatabaseCheckOutput"]
