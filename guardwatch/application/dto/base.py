from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base DTO: snake_case attributes, camelCase JSON (both accepted on input)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
