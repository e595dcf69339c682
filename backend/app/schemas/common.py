from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: snake_case attributes, camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
        from_attributes=True,
    )


class PartialModel(CamelModel):
    """Base for PATCH bodies: unknown keys are ignored, explicit nulls are dropped."""

    model_config = ConfigDict(extra="ignore")

    def changes(self) -> dict[str, Any]:
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


def today() -> date:
    return date.today()
