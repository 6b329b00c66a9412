"""
Table-driven inputs: text areas, password, file, hidden and other simple
controls described by the registry's MAPPINGS table.
"""

import logging

from ..collection import to_param
from ..exceptions import MappingNotFoundError
from ..nodes import Node, Text
from ..registry import ResolvedType, lookup_mapping, register_input
from .base import Input

logger = logging.getLogger(__name__)


@register_input(ResolvedType.TEXT, ResolvedType.PASSWORD, ResolvedType.FILE, ResolvedType.MAPPING)
class MappingInput(Input):
    """Renders the control listed in MAPPINGS for the resolved sub-type."""

    @property
    def mapping_name(self):
        return self.resolution.mapping_name

    @property
    def type_class(self) -> str:
        return str(self.mapping_name or self.input_type.value)

    def mapping(self):
        mapping = lookup_mapping(self.mapping_name)
        if mapping is None:
            logger.error(f"Could not find method for {self.mapping_name!r} on '{self.attribute}'")
            raise MappingNotFoundError(self.mapping_name, self.attribute)
        return mapping

    def render(self) -> Node:
        mapping = self.mapping()
        attrs = {}
        if mapping.input_type:
            attrs['type'] = mapping.input_type
        attrs.update(self.base_attributes())

        if mapping.tag == 'textarea':
            attrs['placeholder'] = self.placeholder_text()
            node = Node('textarea', attrs)
            if self.value is not None:
                node.append(Text(to_param(self.value)))
            return self.finish(node)

        if mapping.renders_value and self.value is not None:
            attrs['value'] = to_param(self.value)
        if mapping.input_type == 'password':
            attrs.update(self.size_attributes())
            attrs['placeholder'] = self.placeholder_text()
        return self.finish(Node(mapping.tag, attrs))


@register_input(ResolvedType.HIDDEN)
class HiddenInput(MappingInput):
    """Hidden field: no label, hint or required/optional decoration."""

    decorates_requirement = False

    def default_components(self):
        return ['input']

    def hint_text(self):
        return None
