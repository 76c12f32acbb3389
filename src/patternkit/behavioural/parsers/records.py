"""Customer record produced by every parser variant."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter


class Record(BaseModel):
    """Flat customer record; equality is by value."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    name: str
    age: str
    identifier: str = Field(validation_alias=AliasChoices("identifier", "cpf"))


RecordList = TypeAdapter(list[Record])


__all__ = ["Record", "RecordList"]
