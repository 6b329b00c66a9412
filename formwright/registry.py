"""
Input type registry for formwright.

Maps a requested input type, explicit or inferred from column metadata, to a
closed ``ResolvedType`` and from there to the input class that renders it.
Unknown names are rejected here, at resolution time, so a render never
starts for a type nobody can draw.
"""

from enum import Enum
import logging
import re
from typing import Any, Callable, Dict, NamedTuple, Optional, Type

from .exceptions import MappingNotFoundError, UnresolvedTypeError, UnsupportedTypeError

logger = logging.getLogger(__name__)


class ResolvedType(str, Enum):
    """Closed set of input types."""

    STRING = 'string'
    EMAIL = 'email'
    URL = 'url'
    SEARCH = 'search'
    TEL = 'tel'
    TEXT = 'text'
    INTEGER = 'integer'
    FLOAT = 'float'
    DECIMAL = 'decimal'
    BOOLEAN = 'boolean'
    DATE = 'date'
    DATETIME = 'datetime'
    TIME = 'time'
    SELECT = 'select'
    RADIO = 'radio'
    CHECKBOX = 'checkbox'
    COUNTRY = 'country'
    TIME_ZONE = 'time_zone'
    FILE = 'file'
    PASSWORD = 'password'
    HIDDEN = 'hidden'
    MAPPING = 'mapping'

    def __str__(self) -> str:
        return self.value


STRING_SUBTYPES = (ResolvedType.EMAIL, ResolvedType.URL, ResolvedType.SEARCH, ResolvedType.TEL)
NUMERIC_TYPES = (ResolvedType.INTEGER, ResolvedType.FLOAT, ResolvedType.DECIMAL)
COMPOSITE_TYPES = (ResolvedType.DATE, ResolvedType.DATETIME, ResolvedType.TIME)

TYPE_ALIASES = {
    'check_boxes': ResolvedType.CHECKBOX,
    'checkboxes': ResolvedType.CHECKBOX,
    'textarea': ResolvedType.TEXT,
    'number': ResolvedType.FLOAT,
}

COLUMN_TYPES = {
    'string': ResolvedType.STRING,
    'text': ResolvedType.TEXT,
    'integer': ResolvedType.INTEGER,
    'float': ResolvedType.FLOAT,
    'decimal': ResolvedType.DECIMAL,
    'boolean': ResolvedType.BOOLEAN,
    'date': ResolvedType.DATE,
    'datetime': ResolvedType.DATETIME,
    'timestamp': ResolvedType.DATETIME,
    'time': ResolvedType.TIME,
}

# Checked in order; the first matching pattern wins.
NAME_PATTERNS = (
    (re.compile(r'password'), ResolvedType.PASSWORD),
    (re.compile(r'time_zone'), ResolvedType.TIME_ZONE),
    (re.compile(r'country'), ResolvedType.COUNTRY),
    (re.compile(r'email'), ResolvedType.EMAIL),
    (re.compile(r'(^|_)url(_|$)'), ResolvedType.URL),
    (re.compile(r'phone|(^|_)tel(_|$)'), ResolvedType.TEL),
)

ASSOCIATION_PATTERN = re.compile(r'_ids?$')


class Resolution(NamedTuple):
    """Outcome of type resolution: the type and, for mappings, the sub-type name."""

    type: ResolvedType
    mapping_name: Optional[str] = None


class MappingSpec(NamedTuple):
    """Control emitted for a mapping sub-type."""

    tag: str
    input_type: Optional[str]
    renders_value: bool


MAPPINGS = {
    'text': MappingSpec('textarea', None, True),
    'password': MappingSpec('input', 'password', False),
    'file': MappingSpec('input', 'file', False),
    'hidden': MappingSpec('input', 'hidden', True),
    'color': MappingSpec('input', 'color', True),
}

_INPUTS: Dict[ResolvedType, Type] = {}


def register_input(*types: ResolvedType) -> Callable[[Type], Type]:
    """
    Register an input class for one or more resolved types.

    Args:
        *types: Types rendered by the decorated class

    Returns:
        Class decorator
    """
    def decorator(cls: Type) -> Type:
        for resolved_type in types:
            _INPUTS[ResolvedType(resolved_type)] = cls
        return cls
    return decorator


def variant_for(resolved_type: ResolvedType) -> Type:
    """
    Get the input class registered for a resolved type.

    Raises:
        UnresolvedTypeError: If nothing is registered for the type
    """
    try:
        return _INPUTS[ResolvedType(resolved_type)]
    except (KeyError, ValueError):
        logger.error(f"No input registered for type '{resolved_type}'")
        raise UnresolvedTypeError(resolved_type)


def registered_types():
    return sorted(_INPUTS, key=lambda t: t.value)


def coerce_type(type_name: Any) -> Optional[ResolvedType]:
    """Convert a type name or alias to a ResolvedType, or None if unknown."""
    if isinstance(type_name, ResolvedType):
        return type_name
    if type_name is None:
        return None
    name = str(type_name).strip().lower()
    if name in TYPE_ALIASES:
        return TYPE_ALIASES[name]
    try:
        return ResolvedType(name)
    except ValueError:
        return None


def lookup_mapping(name: Optional[str]) -> Optional[MappingSpec]:
    """Find the mapping entry for a sub-type name; None when absent."""
    if name is None:
        return None
    return MAPPINGS.get(str(name).lower())


def resolve(explicit_type: Any, column_type: Optional[str], attribute_name: str,
            is_association: bool = False, has_collection: bool = False) -> Resolution:
    """
    Resolve the input type for an attribute.

    Precedence: explicit type, then collection/association, then attribute
    name heuristics, then column type. Anything left over is a mapping
    attempt named after the column type.

    Args:
        explicit_type: Value of the ``as`` option, or None
        column_type: Column type reported by the metadata adapter, or None
        attribute_name: Attribute being rendered
        is_association: Whether the adapter reports an association
        has_collection: Whether a ``collection`` option was given

    Returns:
        Resolution for the request

    Raises:
        UnsupportedTypeError: If an explicit type is unknown
        MappingNotFoundError: If an unmapped column type has no mapping entry
    """
    attribute = str(attribute_name)

    if explicit_type is not None:
        resolved = coerce_type(explicit_type)
        if resolved is None:
            name = str(explicit_type)
            if lookup_mapping(name) is not None:
                resolution = Resolution(ResolvedType.MAPPING, name)
            else:
                logger.error(f"Unsupported input type '{explicit_type}' for '{attribute}'")
                raise UnsupportedTypeError(explicit_type, attribute)
        elif resolved is ResolvedType.MAPPING:
            logger.error(f"Mapping input requested for '{attribute}' without a sub-type")
            raise MappingNotFoundError(None, attribute)
        else:
            resolution = Resolution(resolved, resolved.value)
        logger.debug(f"Resolved '{attribute}' to {resolution.type} (explicit)")
        return resolution

    if has_collection or is_association or ASSOCIATION_PATTERN.search(attribute):
        logger.debug(f"Resolved '{attribute}' to select (collection/association)")
        return Resolution(ResolvedType.SELECT, 'select')

    column = str(column_type).lower() if column_type is not None else None

    if column in (None, 'string'):
        for pattern, resolved in NAME_PATTERNS:
            if pattern.search(attribute):
                logger.debug(f"Resolved '{attribute}' to {resolved} (name pattern)")
                return Resolution(resolved, resolved.value)

    if column is None:
        return Resolution(ResolvedType.STRING, 'string')

    if column in COLUMN_TYPES:
        resolved = COLUMN_TYPES[column]
        logger.debug(f"Resolved '{attribute}' to {resolved} (column type '{column}')")
        return Resolution(resolved, resolved.value)

    if lookup_mapping(column) is None:
        logger.error(f"Could not find method for column type '{column}' on '{attribute}'")
        raise MappingNotFoundError(column, attribute)

    # Mapped names with their own input type (hidden, password, file) use it
    resolved = coerce_type(column)
    if resolved is not None and resolved is not ResolvedType.MAPPING:
        logger.debug(f"Resolved '{attribute}' to {resolved} (mapped column type '{column}')")
        return Resolution(resolved, resolved.value)
    return Resolution(ResolvedType.MAPPING, column)
