"""Connectivity probe configuration resolved from the environment."""

import os
from collections.abc import Mapping
from typing import Literal

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

ENV_VAR = "MONGODB_URI"
DEFAULT_URI = "mongodb://localhost:27017/job-tracker"
HIDDEN_TARGET = "MongoDB Atlas (hidden for security)"


class ProbeConfig(BaseModel):
    uri: str = Field(default=DEFAULT_URI, description="MongoDB connection URI")
    source: Literal["environment", "default"] = Field(
        default="default",
        description="Where the URI came from.",
    )

    model_config = {"extra": "forbid"}

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ProbeConfig":
        """Resolve the config once from ``MONGODB_URI``.

        When ``environ`` is None, a ``.env`` file found from the working
        directory is loaded first (variables already set are kept) and
        ``os.environ`` is read. An unset or empty variable selects the default.
        """
        if environ is None:
            load_dotenv(find_dotenv(usecwd=True))
            environ = os.environ
        uri = environ.get(ENV_VAR)
        if uri:
            return cls(uri=uri, source="environment")
        return cls()

    @property
    def display_target(self) -> str:
        """Printable target; URIs taken from the environment may carry credentials."""
        if self.source == "environment":
            return HIDDEN_TARGET
        return self.uri
