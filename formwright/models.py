"""
Request model for a single input render.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InputRequest(BaseModel):
    """What the caller asked for: object, attribute, explicit type and options."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    obj: Any = None
    attribute_name: str
    explicit_type: Optional[Any] = None
    options: Dict[str, Any] = Field(default_factory=dict)

    @field_validator('attribute_name', mode='before')
    @classmethod
    def stringify_attribute(cls, v):
        if v is None or str(v) == '':
            raise ValueError('attribute name must not be empty')
        return str(v)

    @field_validator('options', mode='before')
    @classmethod
    def copy_options(cls, v):
        return dict(v or {})
