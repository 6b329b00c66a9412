"""
Collection normalization for select, radio and checkbox inputs.

Turns whatever the caller passes as a collection (scalars, [label, value]
pairs, dicts, ranges, domain objects, or nothing at all for booleans) into
an ordered list of ``CollectionEntry`` tuples. Order always follows the
source collection; nothing is sorted.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
import logging
from typing import Any, Callable, List, Optional, Sequence, Union

from .exceptions import MalformedCollectionError
from .i18n import Translator, TranslationCache

logger = logging.getLogger(__name__)

BOOLEAN_COLLECTION_KEY = 'boolean_collection'

DEFAULT_LABEL_METHODS = ('to_label', 'name', 'title', 'label')
DEFAULT_VALUE_METHODS = ('id', 'pk')


@dataclass(frozen=True)
class CollectionEntry:
    """One normalized collection item."""

    label: str
    value: Any
    selected: bool = False
    disabled: bool = False

    @property
    def param(self) -> str:
        """The value as it appears in markup."""
        return to_param(self.value)


def to_param(value: Any) -> str:
    """
    Stringify a value for use in markup.

    Booleans become ``true``/``false``, enum members their name, None the
    empty string.
    """
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _as_number(value: Any) -> Optional[Decimal]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float, Decimal)):
        return Decimal(str(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            return None
    return None


def values_match(entry_value: Any, current_value: Any) -> bool:
    """
    Compare a collection value with the attribute's current value.

    Numeric values compare numerically when the entry value is a number,
    everything else compares by its markup form.
    """
    if current_value is None:
        return False
    if isinstance(entry_value, (int, float, Decimal)) and not isinstance(entry_value, bool):
        entry_number = _as_number(entry_value)
        current_number = _as_number(current_value)
        if entry_number is not None and current_number is not None:
            return entry_number == current_number
    return to_param(entry_value) == to_param(current_value)


def is_selected(entry_value: Any, current_value: Any) -> bool:
    """Check selection against a scalar or a list of current values."""
    if isinstance(current_value, (list, tuple, set, frozenset)):
        return any(values_match(entry_value, value) for value in current_value)
    return values_match(entry_value, current_value)


class Extractor:
    """Extracts a label or value from a collection item."""

    def extract(self, item: Any) -> Any:
        raise NotImplementedError


class AttributeExtractor(Extractor):
    """Reads a named attribute, calling it when it is a method."""

    def __init__(self, name: str):
        self.name = name

    def extract(self, item: Any) -> Any:
        if isinstance(item, dict) and self.name in item:
            return item[self.name]
        value = getattr(item, self.name)
        return value() if callable(value) else value

    def __repr__(self) -> str:
        return f"AttributeExtractor({self.name!r})"


class CallableExtractor(Extractor):
    """Calls an arbitrary unary function."""

    def __init__(self, func: Callable[[Any], Any]):
        self.func = func

    def extract(self, item: Any) -> Any:
        return self.func(item)


class FirstAvailableExtractor(Extractor):
    """Tries attribute names in order, falling back to another extractor."""

    def __init__(self, names: Sequence[str], fallback: Extractor):
        self.names = tuple(names)
        self.fallback = fallback

    def extract(self, item: Any) -> Any:
        for name in self.names:
            if isinstance(item, dict) and name in item:
                return item[name]
            if hasattr(item, name):
                value = getattr(item, name)
                return value() if callable(value) else value
        return self.fallback.extract(item)


IDENTITY = CallableExtractor(lambda item: item)
STRINGIFY = CallableExtractor(to_param)


def make_extractor(method: Union[str, Callable[[Any], Any], Extractor, None]) -> Optional[Extractor]:
    """Wrap a label/value method option in an Extractor."""
    if method is None or isinstance(method, Extractor):
        return method
    if isinstance(method, str):
        return AttributeExtractor(method)
    if callable(method):
        return CallableExtractor(method)
    raise TypeError(f"label/value methods must be a name or a callable, got {method!r}")


def _is_pair(item: Any) -> bool:
    return isinstance(item, (list, tuple))


def _is_scalar(item: Any) -> bool:
    return item is None or isinstance(item, (str, bytes, int, float, Decimal, bool, Enum))


def _extract(item: Any, is_pair: bool, label_extractor: Optional[Extractor],
             value_extractor: Optional[Extractor]):
    if is_pair:
        default_label, default_value = item
        label = label_extractor.extract(item) if label_extractor else default_label
        value = value_extractor.extract(item) if value_extractor else default_value
    elif _is_scalar(item):
        label = (label_extractor or STRINGIFY).extract(item)
        value = (value_extractor or IDENTITY).extract(item)
    else:
        label = (label_extractor or FirstAvailableExtractor(DEFAULT_LABEL_METHODS, STRINGIFY)).extract(item)
        value = (value_extractor or FirstAvailableExtractor(DEFAULT_VALUE_METHODS, STRINGIFY)).extract(item)
    return label, value


def normalize(collection: Any,
              label_method: Union[str, Callable, Extractor, None] = None,
              value_method: Union[str, Callable, Extractor, None] = None,
              current_value: Any = None,
              disabled: Any = None) -> List[CollectionEntry]:
    """
    Normalize a collection into entries.

    Args:
        collection: Scalars, pairs, dict, range or domain objects
        label_method: Attribute name or callable producing each label
        value_method: Attribute name or callable producing each value
        current_value: Attribute value used to compute selection
        disabled: Value or list of values whose entries are disabled

    Returns:
        Entries in source order

    Raises:
        MalformedCollectionError: If pairs and non-pairs are mixed, a pair
            does not have exactly two elements, or a label/value method
            cannot be applied to an item
    """
    if collection is None:
        return []
    if isinstance(collection, dict):
        items: List[Any] = [(label, value) for label, value in collection.items()]
    elif isinstance(collection, (str, bytes)):
        items = [collection]
    else:
        items = list(collection)

    label_extractor = make_extractor(label_method)
    value_extractor = make_extractor(value_method)

    pair_flags = [_is_pair(item) for item in items]
    uses_pairs = any(pair_flags)
    if uses_pairs and not all(pair_flags):
        index = pair_flags.index(False)
        logger.error(f"Collection mixes pairs and single items at index {index}")
        raise MalformedCollectionError(items[index], index, "mixed pairs and single items")

    disabled_values = disabled if isinstance(disabled, (list, tuple, set)) else (
        [] if disabled is None else [disabled]
    )

    entries = []
    for index, item in enumerate(items):
        if uses_pairs and len(item) != 2:
            logger.error(f"Collection pair at index {index} has {len(item)} elements")
            raise MalformedCollectionError(item, index, f"expected 2 elements, got {len(item)}")
        try:
            label, value = _extract(item, uses_pairs, label_extractor, value_extractor)
        except (AttributeError, TypeError, KeyError) as e:
            logger.error(f"Cannot extract label/value from collection item at index {index}: {e}")
            raise MalformedCollectionError(item, index, f"cannot extract label/value: {e}") from e

        entries.append(CollectionEntry(
            label=to_param(label),
            value=value,
            selected=is_selected(value, current_value),
            disabled=any(values_match(value, d) for d in disabled_values),
        ))

    logger.debug(f"Normalized collection into {len(entries)} entries")
    return entries


def boolean_collection(translator: Translator, cache: TranslationCache, locale: str) -> List[tuple]:
    """
    The two-entry collection used for boolean attributes.

    Labels are translated from ``formwright.yes`` / ``formwright.no`` and
    memoized per locale until the cache key is invalidated.

    Returns:
        [(yes_label, True), (no_label, False)]
    """
    def compute():
        logger.debug(f"Building boolean collection for locale '{locale}'")
        return (
            (translator.translate('formwright.yes', locale, 'Yes'), True),
            (translator.translate('formwright.no', locale, 'No'), False),
        )

    return [tuple(pair) for pair in cache.fetch(BOOLEAN_COLLECTION_KEY, locale, compute)]


def should_include_blank(options: dict) -> bool:
    """
    Decide whether a select gets an automatic blank option.

    A blank is added unless ``include_blank`` is explicitly false, a
    ``prompt`` is given, or ``input_html.multiple`` is set.
    """
    if 'include_blank' in options and options['include_blank'] is False:
        return False
    if options.get('prompt'):
        return False
    input_html = options.get('input_html') or {}
    if input_html.get('multiple'):
        return False
    return True


def blank_label(options: dict) -> str:
    """Label used for the blank option when ``include_blank`` is a string."""
    include_blank = options.get('include_blank')
    return include_blank if isinstance(include_blank, str) else ''
