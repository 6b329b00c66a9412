"""
Text-like inputs: string plus the email/url/search/tel subtypes.
"""

from ..collection import to_param
from ..nodes import Node
from ..registry import ResolvedType, STRING_SUBTYPES, register_input
from .base import Input


@register_input(ResolvedType.STRING, *STRING_SUBTYPES)
class StringInput(Input):
    """Single-line text control."""

    @property
    def html_type(self) -> str:
        if self.input_type in STRING_SUBTYPES:
            return self.input_type.value
        return 'text'

    def control_classes(self):
        classes = ['string']
        if self.input_type in STRING_SUBTYPES:
            classes.append(self.input_type.value)
        if self.decorates_requirement:
            classes.append('required' if self.required else 'optional')
        return classes

    def render(self) -> Node:
        attrs = {'type': self.html_type}
        attrs.update(self.base_attributes())
        if self.value is not None:
            attrs['value'] = to_param(self.value)
        attrs.update(self.size_attributes())
        attrs['placeholder'] = self.placeholder_text()
        return self.finish(Node('input', attrs))
