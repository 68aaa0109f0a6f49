"""Raw skills-tracker payload before normalization."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RawPayload(BaseModel):
    """
    Untyped JSON value as returned by the backend.
    No schema is assumed; the normalizer searches it for known fields.
    """

    model_config = ConfigDict(extra="allow")

    data: Any = None
    source: str = Field(default="/api/tryhackme", description="API path the payload came from")
