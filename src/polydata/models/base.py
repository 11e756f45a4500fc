"""Shared pydantic config for Data API records."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class DataModel(BaseModel):
    """Immutable record keyed by the API's camelCase JSON names."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # JSON null decodes to the field's zero value
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data
