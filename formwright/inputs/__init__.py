"""
Input variants. Importing this package registers every variant with the
type registry.
"""

from .base import Input
from .string_input import StringInput
from .numeric_input import NumericInput
from .boolean_input import BooleanInput
from .mapping_input import HiddenInput, MappingInput
from .collection_input import CollectionInput
from .priority_input import PriorityInput
from .date_time_input import CompositeField, DateTimeInput

__all__ = [
    'Input',
    'StringInput',
    'NumericInput',
    'BooleanInput',
    'MappingInput',
    'HiddenInput',
    'CollectionInput',
    'PriorityInput',
    'DateTimeInput',
    'CompositeField',
]
