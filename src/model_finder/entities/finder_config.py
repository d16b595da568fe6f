"""Per-model finder configuration."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from sqlalchemy import inspect
from sqlalchemy.exc import NoInspectionAvailable

from model_finder.config import settings


class FinderConfig(BaseModel):
    """Which model to search, which columns to match, and how long to cache.

    Example:
        ```python
        config = FinderConfig(model=Country, columns=["name", "iso_code"])
        ```
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    model: type = Field(..., description="SQLAlchemy mapped class to search")
    columns: tuple[str, ...] = Field(
        ...,
        description="Mapped attribute names ORed together with ILIKE",
        min_length=1,
    )
    ttl: int = Field(default_factory=lambda: settings.cache_ttl, gt=0)
    global_tag: str = Field(default_factory=lambda: settings.cache_tag, min_length=1)

    @field_validator("columns", mode="before")
    @classmethod
    def _column_names(cls, value: Any) -> Any:
        # Accept mapped attributes (Country.name) as well as plain names
        if isinstance(value, (list, tuple)):
            return tuple(getattr(column, "key", column) for column in value)
        return value

    @model_validator(mode="after")
    def _columns_exist(self) -> "FinderConfig":
        try:
            mapper = inspect(self.model)
        except NoInspectionAvailable as e:
            raise ValueError(f"{self.model!r} is not a SQLAlchemy mapped class") from e

        unknown = [name for name in self.columns if name not in mapper.all_orm_descriptors]
        if unknown:
            raise ValueError(f"{self.model.__name__} has no mapped attributes named {unknown}")
        return self
