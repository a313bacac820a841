from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar

from pydantic import BaseModel, Field


TBaseSchema = TypeVar("TBaseSchema", bound="BaseSchema")


class BaseSchema(BaseModel):
    def to_dict(self, exclude_none: bool = False) -> dict[str, object]:
        return self.model_dump(exclude_none=exclude_none)

    @classmethod
    def from_dict(cls: type[TBaseSchema], data: Mapping[str, object]) -> TBaseSchema:
        return cls.model_validate(data)


class RunConfig(BaseSchema):
    run_id: str
    seed: int
    max_generations: int = Field(default=1000, gt=0)
    population_size: int = Field(default=1000, gt=0)
    tournament_size: int = Field(default=2, gt=0)
    mutation_rate: float | None = Field(default=None, ge=0.0, le=1.0)
    crossover_rate: float = Field(default=0.5, ge=0.0, le=1.0)
