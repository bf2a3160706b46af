"""
Base class for API schemas.

The wire format is camelCase (userId, accountNumber) while the
Python side stays snake_case. Models accept either spelling and
can be built straight from ORM objects.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
