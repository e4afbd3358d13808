"""Output schemas for secrets commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class SecretsGenerateOutput(BaseOutputSchema):
    """Output schema for secrets generate command.

    Secret fields are empty strings when the random source failed.
    """

    primary_name: str = Field(..., description="Environment variable name for the primary secret")
    primary: str = Field(..., description="64-character lowercase hex secret (32 random bytes)")
    secondary_name: str = Field(..., description="Environment variable name for the secondary secret")
    secondary: str = Field(..., description="32-character lowercase hex secret (16 random bytes)")
    instructions: list[str] = Field(..., description="Steps for registering the primary secret in the dashboard")
    reminder: str = Field(..., description="Closing security reminder")


register_output_schema("secrets", "generate", SecretsGenerateOutput)
