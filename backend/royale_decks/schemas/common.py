"""Base schema classes shared by request and response models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Expose snake_case attributes as camelCase JSON fields."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SuccessEnvelope(CamelModel):
    """Common `status` marker wrapping every successful payload."""

    status: Literal["success"] = "success"


__all__ = ["CamelModel", "SuccessEnvelope"]
