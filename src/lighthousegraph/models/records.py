"""Raw dependency records as served by the assets store."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DependencyRecord(BaseModel):
    """One tracked entity and the names it depends on.

    Extra keys in the store (descriptions, licences, ...) are ignored.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    name: str
    dependencies: list[str] = Field(description="Names of entities this one depends on")
