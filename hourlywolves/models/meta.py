from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class ActivityModel(BaseModel):
    """Base for records decoded from the photo host's ActivityStreams JSON.

    Keys are camelCase on the wire. Unknown keys are ignored and absent or
    null keys fall back to the field's zero value, so every field must carry
    a default.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra='ignore',
    )

    @model_validator(mode='before')
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
