"""Service configuration — static labels stamped on every ScoreResult."""

import os

from pydantic import BaseModel, ConfigDict

DEFAULT_MODEL_NAME = "heuristic-mvp"
DEFAULT_BACKEND = "local"


class ServiceConfig(BaseModel):
    """Configuration for the scoring service."""

    model_config = ConfigDict(protected_namespaces=())

    model_name: str = DEFAULT_MODEL_NAME
    backend: str = DEFAULT_BACKEND

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        """Read MODEL_NAME and BACKEND, falling back to the defaults."""
        return cls(
            model_name=os.getenv("MODEL_NAME") or DEFAULT_MODEL_NAME,
            backend=os.getenv("BACKEND") or DEFAULT_BACKEND,
        )
