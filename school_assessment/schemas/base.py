from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

# surrounding whitespace is dropped before the length check
NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2)]


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire; either is accepted on input."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
