"""
Numeric inputs (integer, float, decimal).
"""

from ..collection import to_param
from ..nodes import Node
from ..registry import NUMERIC_TYPES, register_input
from .base import Input


@register_input(*NUMERIC_TYPES)
class NumericInput(Input):
    """
    Number control.

    ``min``/``max`` come from declared comparison validations and ``step``
    is only set for integers; absent constraints leave the attribute out.
    """

    def render(self) -> Node:
        attrs = {'type': 'number'}
        attrs.update(self.base_attributes())
        if self.value is not None:
            attrs['value'] = to_param(self.value)
        attrs.update(self.size_attributes())
        attrs.update(self.constraints.html_attributes())
        attrs['placeholder'] = self.placeholder_text()
        return self.finish(Node('input', attrs))
