"""Taggable content API schemas."""

from pydantic import BaseModel


class SelectOptionResponse(BaseModel):
    label: str
    value: int


class TaggableOptionsResponse(BaseModel):
    """Select options for one taxonomy, ordered by name."""

    kind: str
    options: list[SelectOptionResponse]
