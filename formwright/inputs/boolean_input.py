"""
Boolean input rendered as a single checkbox.
"""

from ..nodes import Fragment, Node
from ..registry import ResolvedType, register_input
from .base import Input

TRUE_VALUES = {'1', 'true', 't', 'yes', 'y', 'on'}


def is_checked(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in TRUE_VALUES
    return bool(value)


@register_input(ResolvedType.BOOLEAN)
class BooleanInput(Input):
    """
    Checkbox with a preceding hidden ``0`` field so unchecked boxes still
    submit a value. The label follows the control by default.
    """

    checked_value = '1'
    unchecked_value = '0'

    def default_components(self):
        return list(self.builder.setting('boolean_components'))

    def render(self) -> Node:
        hidden = Node('input', {
            'type': 'hidden',
            'name': self.naming.name,
            'value': self.unchecked_value,
        })
        if self.options.get('disabled') is True:
            hidden.set('disabled', True)

        attrs = {'type': 'checkbox'}
        attrs.update(self.base_attributes())
        attrs['value'] = self.checked_value
        attrs['checked'] = is_checked(self.value)
        checkbox = self.finish(Node('input', attrs))
        return Fragment([hidden, checkbox])
