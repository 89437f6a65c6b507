"""Pydantic schemas for reelr configuration files."""

from reelr.schemas.naming import NamingSchema, validate_naming_data

__all__ = [
    "NamingSchema",
    "validate_naming_data",
]
