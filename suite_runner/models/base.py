"""Base model configuration for declared suite inputs."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable base model for catalogs and runner configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")
