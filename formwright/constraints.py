"""
Constraint inference for numeric inputs.

Reads declared validations and derives the HTML ``min``/``max``/``step``
attributes and required-ness. The result is advisory only: formwright reads
validations, it never enforces them.
"""

from dataclasses import dataclass
from decimal import Decimal
import logging
from typing import Any, Dict, Iterable, Optional

from .metadata import Validation
from .registry import NUMERIC_TYPES, ResolvedType, coerce_type

logger = logging.getLogger(__name__)

# Inclusive kinds first so they win over exclusive ones
MIN_KINDS = ('greater_than_or_equal_to', 'greater_than')
MAX_KINDS = ('less_than_or_equal_to', 'less_than')


@dataclass(frozen=True)
class ConstraintSet:
    """Derived constraints; None means the attribute is omitted."""

    min: Optional[Any] = None
    max: Optional[Any] = None
    step: Optional[Any] = None
    required: bool = False

    def html_attributes(self) -> Dict[str, Any]:
        """Numeric HTML attributes for the fields that are present."""
        attrs = {}
        for name in ('min', 'max', 'step'):
            value = getattr(self, name)
            if value is not None:
                attrs[name] = format_bound(value)
        return attrs


def format_bound(value: Any) -> str:
    """Render a numeric bound without spurious trailing zeros (18.0 -> 18)."""
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Decimal):
        normalized = value.normalize()
        return format(normalized, 'f')
    return str(value)


def resolve_bound(bound: Any, obj: Any = None) -> Optional[Any]:
    """
    Resolve a validation bound to a number.

    Bounds may be literal numbers, callables taking the object, or the name
    of an attribute on the object.

    Args:
        bound: Declared bound
        obj: Object being rendered

    Returns:
        Numeric bound, or None when it cannot be resolved
    """
    if callable(bound):
        if obj is None or isinstance(obj, str):
            return None
        bound = bound(obj)
    elif isinstance(bound, str):
        if obj is None or isinstance(obj, str):
            return None
        attribute = getattr(obj, bound, None)
        bound = attribute() if callable(attribute) else attribute

    if isinstance(bound, (int, float, Decimal)) and not isinstance(bound, bool):
        return bound

    if bound is not None:
        logger.debug(f"Ignoring non-numeric validation bound: {bound!r}")
    return None


def _first_bound(by_kind: Dict[str, Validation], kinds: Iterable[str], obj: Any) -> Optional[Any]:
    for kind in kinds:
        if kind in by_kind:
            value = resolve_bound(by_kind[kind].bound, obj)
            if value is not None:
                return value
    return None


def infer(validations: Iterable[Validation], resolved_type: Any, obj: Any = None) -> ConstraintSet:
    """
    Infer a constraint set from declared validations.

    Args:
        validations: Validations declared on the attribute
        resolved_type: Input type being rendered
        obj: Object used to resolve callable or attribute bounds

    Returns:
        ConstraintSet with min/max/step only for numeric types
    """
    by_kind: Dict[str, Validation] = {}
    for validation in validations or []:
        by_kind.setdefault(validation.kind, validation)

    required = 'presence' in by_kind
    resolved = coerce_type(resolved_type)

    if resolved not in NUMERIC_TYPES:
        return ConstraintSet(required=required)

    constraints = ConstraintSet(
        min=_first_bound(by_kind, MIN_KINDS, obj),
        max=_first_bound(by_kind, MAX_KINDS, obj),
        step=1 if resolved is ResolvedType.INTEGER else None,
        required=required,
    )
    logger.debug(f"Inferred constraints for {resolved}: {constraints}")
    return constraints
