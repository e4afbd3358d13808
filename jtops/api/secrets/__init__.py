"""Secrets API module."""

from .._output_schemas.secrets import SecretsGenerateOutput

__all__ = ["SecretsGenerateOutput"]
