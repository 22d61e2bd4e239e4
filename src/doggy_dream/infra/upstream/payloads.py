"""Wire shapes of the catalog/search service responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class SearchPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int = Field(ge=0)
    result_ids: list[str] = Field(default_factory=list, alias="resultIds")
    next: str | None = None
    prev: str | None = None


class DogPayload(BaseModel):
    id: str
    img: str
    name: str
    age: int
    breed: str
    zip_code: str


BreedsPayload = TypeAdapter(list[str])
DogsPayload = TypeAdapter(list[DogPayload])
