"""Output schemas for database commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class DatabaseCheckOutput(BaseOutputSchema):
    """Output schema for database check command.

    Output structure:
    - errors: list[str] - underlying failure message, empty list on success
    - warnings: list[str] - unused, always empty
    - uri_source: str - "environment" or "default"
    - target: str - printable connection target (environment URIs are hidden)
    - host: str - negotiated host, empty string on failure
    - database: str - resolved database name, empty string on failure
    - ready_state: str - "Connected" or "Disconnected"
    - collections: list[str] - collection names in the resolved database
    - closed: bool - whether the client was closed before the command returned
    - failure_kind: str - "connect", "list", or empty string on success
    - tips: list[str] - troubleshooting tips, empty list on success
    """

    uri_source: str = Field(..., description="Where the URI came from: 'environment' or 'default'")
    target: str = Field(..., description="Printable connection target; environment URIs are hidden")
    host: str = Field(..., description="Negotiated host, empty string on failure")
    database: str = Field(..., description="Resolved database name, empty string on failure")
    ready_state: str = Field(..., description="'Connected' or 'Disconnected'")
    collections: list[str] = Field(..., description="Collection names in the resolved database")
    closed: bool = Field(..., description="Whether the client was closed before returning")
    failure_kind: str = Field(..., description="'connect', 'list', or empty string on success")
    tips: list[str] = Field(..., description="Troubleshooting tips, empty list on success")


register_output_schema("database", "check", DatabaseCheckOutput)
