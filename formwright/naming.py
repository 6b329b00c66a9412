"""
HTML naming conventions shared by every input.

``FieldNaming`` derives ids (``user_name``), names (``user[name]``),
composite sub-field ids (``user_born_at_1i``) and the ids of collection
items (``user_active_true``).
"""

import re
from typing import Any, Optional

from .collection import to_param

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])')
_INVALID_ID_CHARS = re.compile(r'[^-\w]')


def underscore(name: str) -> str:
    """Convert CamelCase to snake_case."""
    return _CAMEL_BOUNDARY.sub('_', name).replace('-', '_').lower()


def humanize(attribute: str) -> str:
    """Convert an attribute name to a label (``born_at`` -> ``Born at``)."""
    text = str(attribute)
    if text.endswith('_id'):
        text = text[:-3]
    text = text.replace('_', ' ').strip()
    return text[:1].upper() + text[1:]


def sanitize_value(value: Any) -> str:
    """Sanitize a value for use as an id suffix."""
    text = re.sub(r'\s', '_', to_param(value))
    return _INVALID_ID_CHARS.sub('', text).lower()


def object_name_for(obj: Any, object_name: Optional[str] = None) -> str:
    """
    Derive the object name used as the id/name prefix.

    Args:
        obj: Model object or string naming a bare form
        object_name: Explicit override

    Returns:
        Object name, e.g. ``user`` for a ``User`` instance
    """
    if object_name:
        return str(object_name)
    if isinstance(obj, str):
        return obj
    if obj is None:
        return ''
    cls = obj if isinstance(obj, type) else type(obj)
    return underscore(getattr(cls, '__form_name__', None) or cls.__name__)


class FieldNaming:
    """Id and name conventions for one attribute of one object."""

    def __init__(self, object_name: str, attribute: str):
        self.object_name = object_name
        self.attribute = str(attribute)

    @property
    def id(self) -> str:
        if not self.object_name:
            return self.attribute
        return f"{self.object_name}_{self.attribute}"

    @property
    def name(self) -> str:
        if not self.object_name:
            return self.attribute
        return f"{self.object_name}[{self.attribute}]"

    def collection_name(self) -> str:
        return f"{self.name}[]"

    def item_id(self, value: Any) -> str:
        return f"{self.id}_{sanitize_value(value)}"

    def position_id(self, position: int) -> str:
        return f"{self.id}_{position}i"

    def position_name(self, position: int) -> str:
        if not self.object_name:
            return f"{self.attribute}({position}i)"
        return f"{self.object_name}[{self.attribute}({position}i)]"
