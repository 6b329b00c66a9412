"""
Metadata adapters for formwright.

Inputs never introspect models directly. They ask a ``MetadataAdapter`` for
the column type, column limit, declared validations, current value and
errors of an attribute. Missing metadata is not an error: every method
answers ``None`` or an empty list so inputs can omit the derived attribute.

Adapters provided here:
- NullMetadataAdapter: bare field names with no backing object
- AttributeMetadataAdapter: plain objects declaring ``__columns__`` and
  ``__validations__`` class attributes
- SchemaMetadataAdapter: YAML/dict field schemas (``fields:`` layout)
- PydanticMetadataAdapter: pydantic models
"""

from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
import logging
from typing import Any, Dict, List, Optional, Union, get_args, get_origin, Literal

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)

VALIDATION_KINDS = (
    'presence',
    'greater_than',
    'greater_than_or_equal_to',
    'less_than',
    'less_than_or_equal_to',
)


class Validation(BaseModel):
    """A declared validation: its kind and optional bound."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: str
    bound: Any = None


def validations_from_config(declared: Any) -> List[Validation]:
    """
    Build validations from the declaration shapes adapters accept.

    Accepts a list of ``Validation`` objects, ``{'kind': ..., 'bound': ...}``
    dicts, or a single ``{kind: bound}`` mapping (``presence: true``).
    """
    if not declared:
        return []
    if isinstance(declared, dict):
        if 'kind' in declared:
            declared = [declared]
        else:
            return [
                Validation(kind=kind, bound=None if kind == 'presence' else bound)
                for kind, bound in declared.items()
                if not (kind == 'presence' and not bound)
            ]

    validations = []
    for item in declared:
        if isinstance(item, Validation):
            validations.append(item)
        elif isinstance(item, dict):
            validations.append(Validation(**item))
        elif isinstance(item, str):
            validations.append(Validation(kind=item))
        else:
            logger.warning(f"Ignoring unrecognised validation declaration: {item!r}")
    return validations


class MetadataAdapter:
    """Contract consumed by inputs to read model metadata."""

    def column_type(self, obj: Any, attribute: str) -> Optional[str]:
        return None

    def column_limit(self, obj: Any, attribute: str) -> Optional[int]:
        return None

    def validations(self, obj: Any, attribute: str) -> List[Validation]:
        return []

    def current_value(self, obj: Any, attribute: str) -> Any:
        return None

    def is_association(self, obj: Any, attribute: str) -> bool:
        return False

    def choices(self, obj: Any, attribute: str) -> Optional[List[Any]]:
        return None

    def errors(self, obj: Any, attribute: str) -> List[str]:
        return []

    def supports_validations(self, obj: Any) -> bool:
        """Whether required-ness can be derived from validations for this object."""
        return False


class NullMetadataAdapter(MetadataAdapter):
    """Adapter for bare field names; knows nothing about the attribute."""


class AttributeMetadataAdapter(MetadataAdapter):
    """
    Adapter for plain Python objects.

    The object's class may declare:
        __columns__: {attr: 'type'} or {attr: {'type': ..., 'limit': ...}}
        __validations__: {attr: [validation declarations]}
        __associations__: iterable of association attribute names
    and the instance may carry an ``errors`` dict of attr -> messages.
    """

    def _column(self, obj: Any, attribute: str) -> Dict[str, Any]:
        columns = getattr(type(obj), '__columns__', None) or {}
        column = columns.get(attribute)
        if column is None:
            return {}
        if isinstance(column, str):
            return {'type': column}
        return dict(column)

    def column_type(self, obj: Any, attribute: str) -> Optional[str]:
        return self._column(obj, attribute).get('type')

    def column_limit(self, obj: Any, attribute: str) -> Optional[int]:
        return self._column(obj, attribute).get('limit')

    def validations(self, obj: Any, attribute: str) -> List[Validation]:
        declared = (getattr(type(obj), '__validations__', None) or {}).get(attribute)
        return validations_from_config(declared)

    def current_value(self, obj: Any, attribute: str) -> Any:
        if isinstance(obj, dict):
            return obj.get(attribute)
        return getattr(obj, attribute, None)

    def is_association(self, obj: Any, attribute: str) -> bool:
        return attribute in (getattr(type(obj), '__associations__', None) or ())

    def errors(self, obj: Any, attribute: str) -> List[str]:
        errors = getattr(obj, 'errors', None)
        if not isinstance(errors, dict):
            return []
        messages = errors.get(attribute) or []
        return [messages] if isinstance(messages, str) else list(messages)

    def supports_validations(self, obj: Any) -> bool:
        return hasattr(type(obj), '__validations__')


# Schema field types mapped to column types
SCHEMA_COLUMN_TYPES = {
    'string': 'string',
    'text': 'text',
    'number': 'float',
    'float': 'float',
    'integer': 'integer',
    'decimal': 'decimal',
    'boolean': 'boolean',
    'date': 'date',
    'datetime': 'datetime',
    'time': 'time',
    'enum': 'string',
}


class SchemaMetadataAdapter(MetadataAdapter):
    """
    Adapter for field schemas in the YAML ``fields:`` layout.

    Example field config::

        amount:
          type: number
          label: Amount
          required: true
          min_value: 0
          max_value: 10000

    The rendered object is a plain dict of current values.
    """

    def __init__(self, schema: Dict[str, Any], errors: Optional[Dict[str, List[str]]] = None):
        if 'fields' not in schema:
            raise ValueError("Schema must contain 'fields' key")
        self.schema = schema
        self.fields: Dict[str, Dict[str, Any]] = schema['fields'] or {}
        self._errors = errors or {}

    def field_config(self, attribute: str) -> Dict[str, Any]:
        return self.fields.get(attribute) or {}

    def column_type(self, obj: Any, attribute: str) -> Optional[str]:
        config = self.field_config(attribute)
        if not config:
            return None
        field_type = config.get('type', 'string')
        if field_type == 'string' and config.get('multiline', False):
            return 'text'
        return SCHEMA_COLUMN_TYPES.get(field_type, field_type)

    def column_limit(self, obj: Any, attribute: str) -> Optional[int]:
        config = self.field_config(attribute)
        return config.get('max_length', config.get('maxLength'))

    def validations(self, obj: Any, attribute: str) -> List[Validation]:
        config = self.field_config(attribute)
        validations = []
        if config.get('required', False):
            validations.append(Validation(kind='presence'))
        if 'min_value' in config:
            validations.append(Validation(kind='greater_than_or_equal_to', bound=config['min_value']))
        if 'max_value' in config:
            validations.append(Validation(kind='less_than_or_equal_to', bound=config['max_value']))
        if 'exclusive_min' in config:
            validations.append(Validation(kind='greater_than', bound=config['exclusive_min']))
        if 'exclusive_max' in config:
            validations.append(Validation(kind='less_than', bound=config['exclusive_max']))
        return validations

    def current_value(self, obj: Any, attribute: str) -> Any:
        if isinstance(obj, dict):
            if attribute in obj:
                return obj[attribute]
            return self.field_config(attribute).get('default')
        return None

    def choices(self, obj: Any, attribute: str) -> Optional[List[Any]]:
        choices = self.field_config(attribute).get('choices')
        return list(choices) if choices else None

    def errors(self, obj: Any, attribute: str) -> List[str]:
        messages = self._errors.get(attribute) or []
        return [messages] if isinstance(messages, str) else list(messages)

    def supports_validations(self, obj: Any) -> bool:
        return True


def _unwrap_optional(annotation: Any) -> Any:
    """Strip Optional[...] from an annotation."""
    if get_origin(annotation) is Union:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _python_type_to_column_type(python_type: Any) -> Optional[str]:
    """
    Convert a Python type to a column type string.

    Args:
        python_type: Python type

    Returns:
        Column type string, or None when the type has no column equivalent
    """
    if python_type is bool:
        return 'boolean'
    elif python_type is int:
        return 'integer'
    elif python_type is float:
        return 'float'
    elif python_type is Decimal:
        return 'decimal'
    elif python_type is str:
        return 'string'
    elif python_type is datetime:
        return 'datetime'
    elif python_type is date:
        return 'date'
    elif python_type is time:
        return 'time'
    elif get_origin(python_type) is Literal:
        return 'string'
    elif isinstance(python_type, type) and issubclass(python_type, Enum):
        return 'string'
    return None


class PydanticMetadataAdapter(MetadataAdapter):
    """
    Adapter for pydantic models.

    The rendered object may be a model instance or the model class itself
    (for blank forms). Errors come from an optional ``ValidationError``.
    """

    def __init__(self, validation_error: Optional[ValidationError] = None):
        self._errors: Dict[str, List[str]] = {}
        if validation_error is not None:
            for error in validation_error.errors():
                loc = error.get('loc') or ()
                if loc:
                    self._errors.setdefault(str(loc[0]), []).append(error.get('msg', ''))

    @staticmethod
    def _model_class(obj: Any):
        if isinstance(obj, type) and issubclass(obj, BaseModel):
            return obj
        if isinstance(obj, BaseModel):
            return type(obj)
        return None

    def _field(self, obj: Any, attribute: str):
        model_class = self._model_class(obj)
        if model_class is None:
            return None
        return model_class.model_fields.get(attribute)

    def _annotation(self, obj: Any, attribute: str) -> Any:
        field = self._field(obj, attribute)
        return _unwrap_optional(field.annotation) if field is not None else None

    def column_type(self, obj: Any, attribute: str) -> Optional[str]:
        annotation = self._annotation(obj, attribute)
        return _python_type_to_column_type(annotation) if annotation is not None else None

    def column_limit(self, obj: Any, attribute: str) -> Optional[int]:
        field = self._field(obj, attribute)
        if field is None:
            return None
        for constraint in field.metadata:
            if getattr(constraint, 'max_length', None) is not None:
                return constraint.max_length
        return None

    def validations(self, obj: Any, attribute: str) -> List[Validation]:
        field = self._field(obj, attribute)
        if field is None:
            return []

        validations = []
        if field.is_required():
            validations.append(Validation(kind='presence'))

        # Extract constraints from field metadata
        for constraint in field.metadata:
            if getattr(constraint, 'ge', None) is not None:
                validations.append(Validation(kind='greater_than_or_equal_to', bound=constraint.ge))
            if getattr(constraint, 'gt', None) is not None:
                validations.append(Validation(kind='greater_than', bound=constraint.gt))
            if getattr(constraint, 'le', None) is not None:
                validations.append(Validation(kind='less_than_or_equal_to', bound=constraint.le))
            if getattr(constraint, 'lt', None) is not None:
                validations.append(Validation(kind='less_than', bound=constraint.lt))
        return validations

    def current_value(self, obj: Any, attribute: str) -> Any:
        if isinstance(obj, BaseModel):
            return getattr(obj, attribute, None)
        field = self._field(obj, attribute)
        if field is not None and not field.is_required():
            return field.get_default(call_default_factory=True)
        return None

    def is_association(self, obj: Any, attribute: str) -> bool:
        annotation = self._annotation(obj, attribute)
        if annotation is None:
            return False
        if get_origin(annotation) in (list, set, tuple):
            args = get_args(annotation)
            annotation = args[0] if args else None
        return isinstance(annotation, type) and issubclass(annotation, BaseModel)

    def choices(self, obj: Any, attribute: str) -> Optional[List[Any]]:
        annotation = self._annotation(obj, attribute)
        if get_origin(annotation) is Literal:
            return list(get_args(annotation))
        if isinstance(annotation, type) and issubclass(annotation, Enum):
            return [(member.name.replace('_', ' ').title(), member.value) for member in annotation]
        return None

    def errors(self, obj: Any, attribute: str) -> List[str]:
        return list(self._errors.get(attribute, []))

    def supports_validations(self, obj: Any) -> bool:
        return self._model_class(obj) is not None


def adapter_for(obj: Any) -> MetadataAdapter:
    """
    Pick a metadata adapter for an object.

    Args:
        obj: Model instance, model class, plain object, or a string naming a bare form

    Returns:
        Adapter instance
    """
    if obj is None or isinstance(obj, str):
        return NullMetadataAdapter()
    if PydanticMetadataAdapter._model_class(obj) is not None:
        return PydanticMetadataAdapter()
    return AttributeMetadataAdapter()
