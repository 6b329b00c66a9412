"""
Base class shared by every input.

An input reads metadata for one attribute through the builder's adapter,
works out the value, required-ness and constraints, and renders its control
as a node. Label, hint and error rendering live in the component pipeline,
which calls back into the text helpers defined here.
"""

import logging
from typing import Any, Dict, List, Optional

from ..components import merge_html
from ..constraints import ConstraintSet, infer
from ..i18n import lookup_chain
from ..models import InputRequest
from ..naming import FieldNaming, humanize
from ..nodes import Node
from ..registry import Resolution, ResolvedType

logger = logging.getLogger(__name__)


class Input:
    """Common behavior for all inputs."""

    # Whether required/optional classes and the required mark apply
    decorates_requirement = True

    def __init__(self, builder, request: InputRequest, resolution: Resolution):
        self.builder = builder
        self.request = request
        self.resolution = resolution
        self.input_type: ResolvedType = resolution.type
        self.attribute = request.attribute_name
        self.options: Dict[str, Any] = request.options
        self.naming = FieldNaming(builder.object_name, self.attribute)

        metadata = builder.metadata
        obj = builder.object
        self.column_type = metadata.column_type(obj, self.attribute)
        self.column_limit = metadata.column_limit(obj, self.attribute)
        self.validations = metadata.validations(obj, self.attribute)
        self.errors: List[str] = metadata.errors(obj, self.attribute)
        self._supports_validations = metadata.supports_validations(obj)
        self._current_value = metadata.current_value(obj, self.attribute)

    @property
    def value(self) -> Any:
        """The ``default`` option when given, else the attribute's current value."""
        if self.options.get('default') is not None:
            return self.options['default']
        return self._current_value

    @property
    def constraints(self) -> ConstraintSet:
        return infer(self.validations, self.input_type, self.builder.object)

    @property
    def required(self) -> bool:
        if 'required' in self.options and self.options['required'] is not None:
            return bool(self.options['required'])
        if self._supports_validations:
            return self.constraints.required
        return bool(self.builder.setting('required_by_default', True))

    @property
    def type_class(self) -> str:
        return self.input_type.value

    def requirement_classes(self) -> List[str]:
        classes = [self.type_class]
        if self.decorates_requirement:
            classes.append('required' if self.required else 'optional')
        return classes

    def control_classes(self) -> List[str]:
        return self.requirement_classes()

    def default_components(self) -> List[str]:
        return list(self.builder.setting('components'))

    def components(self) -> List[str]:
        """The ``components`` option replaces the defaults entirely."""
        requested = self.options.get('components')
        if isinstance(requested, str):
            return [requested]
        if requested is not None:
            return [str(name) for name in requested]
        return self.default_components()

    def label_target(self) -> Optional[str]:
        return self.naming.id

    def base_attributes(self) -> Dict[str, Any]:
        """Attributes every control carries, before ``input_html`` is merged."""
        attrs: Dict[str, Any] = {
            'id': self.naming.id,
            'name': self.naming.name,
            'class': self.control_classes(),
        }
        if (self.decorates_requirement and self.required
                and self.builder.setting('browser_validations', True)):
            attrs['required'] = True
        if self.options.get('disabled') is True:
            attrs['disabled'] = True
        return attrs

    def finish(self, node: Node) -> Node:
        """Merge ``input_html`` into the control; user attributes win."""
        merge_html(node, self.options.get('input_html'))
        return node

    def render(self) -> Node:
        raise NotImplementedError

    # Translation helpers

    def translate_key(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.builder.translator.translate(key, self.builder.locale, default)

    def translate(self, namespace: str, default: Optional[str] = None) -> Optional[str]:
        """
        Look up ``formwright.<namespace>`` text for this attribute.

        The object-specific key is tried first, then the ``defaults`` key.
        """
        keys = []
        if self.builder.object_name:
            keys.append(f"formwright.{namespace}.{self.builder.object_name}.{self.attribute}")
        keys.append(f"formwright.{namespace}.defaults.{self.attribute}")
        return lookup_chain(self.builder.translator, keys, self.builder.locale, default)

    def label_text(self) -> str:
        label = self.options.get('label')
        if isinstance(label, str):
            return label
        return self.translate('labels', humanize(self.attribute))

    def hint_text(self) -> Optional[str]:
        hint = self.options.get('hint')
        if isinstance(hint, str):
            return hint
        return self.translate('hints')

    def placeholder_text(self) -> Optional[str]:
        placeholder = self.options.get('placeholder')
        if placeholder is False:
            return None
        if placeholder is not None:
            return str(placeholder)
        return self.translate('placeholders')

    def size_attributes(self) -> Dict[str, Any]:
        """``maxlength`` from the column limit and a capped ``size``."""
        default_size = self.builder.setting('default_input_size', 50)
        limit = self.column_limit
        attrs: Dict[str, Any] = {}
        if limit:
            attrs['maxlength'] = limit
            attrs['size'] = min(limit, default_size)
        else:
            attrs['size'] = default_size
        return attrs

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.naming.id!r}, {self.input_type.value})"
