"""
Shared schema base - snake_case in Python, camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for response models serialized with camelCase keys.

    populate_by_name lets services build models from the snake_case dicts
    returned by the internet_pulse processing functions.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    """Body of 500 responses"""

    error: str
