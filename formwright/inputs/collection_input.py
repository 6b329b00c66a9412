"""
Collection inputs: select, radio buttons and check boxes.
"""

import logging
from typing import Any, List

from ..collection import (
    CollectionEntry, blank_label, boolean_collection, normalize, should_include_blank,
)
from ..nodes import Fragment, Node, Text
from ..registry import ResolvedType, register_input
from .base import Input

logger = logging.getLogger(__name__)


def option_node(entry: CollectionEntry) -> Node:
    return Node('option', {
        'value': entry.param,
        'selected': entry.selected,
        'disabled': entry.disabled,
    }, [Text(entry.label)])


@register_input(ResolvedType.SELECT, ResolvedType.RADIO, ResolvedType.CHECKBOX)
class CollectionInput(Input):
    """Renders normalized collection entries as options or input/label pairs."""

    def collection(self) -> Any:
        """The ``collection`` option, adapter choices, or the yes/no pair."""
        if self.options.get('collection') is not None:
            return self.options['collection']
        choices = self.builder.metadata.choices(self.builder.object, self.attribute)
        if choices is not None:
            return choices
        return boolean_collection(self.builder.translator, self.builder.cache, self.builder.locale)

    def entries(self) -> List[CollectionEntry]:
        disabled = self.options.get('disabled')
        return normalize(
            self.collection(),
            label_method=self.options.get('label_method'),
            value_method=self.options.get('value_method'),
            current_value=self.value,
            disabled=None if isinstance(disabled, bool) else disabled,
        )

    @property
    def multiple(self) -> bool:
        return bool((self.options.get('input_html') or {}).get('multiple'))

    def label_target(self):
        if self.input_type in (ResolvedType.RADIO, ResolvedType.CHECKBOX):
            return None
        return self.naming.id

    def prompt_text(self):
        prompt = self.options.get('prompt')
        if prompt is True:
            return self.translate_key('formwright.prompt', 'Please select')
        if isinstance(prompt, str):
            return prompt
        return None

    def render(self) -> Node:
        if self.input_type is ResolvedType.SELECT:
            return self.render_select(self.entries(), should_include_blank(self.options))
        return self.render_items(self.entries())

    def render_select(self, entries: List[CollectionEntry], include_blank: bool) -> Node:
        attrs = self.base_attributes()
        if self.multiple:
            attrs['name'] = self.naming.collection_name()
        select = Node('select', attrs)

        prompt = self.prompt_text()
        if prompt is not None:
            select.append(Node('option', {'value': ''}, [Text(prompt)]))
        elif include_blank:
            select.append(Node('option', {'value': ''}, [Text(blank_label(self.options))]))

        for entry in entries:
            select.append(option_node(entry))
        return self.finish(select)

    def render_items(self, entries: List[CollectionEntry]) -> Node:
        is_radio = self.input_type is ResolvedType.RADIO
        item_type = 'radio' if is_radio else 'checkbox'
        label_class = 'collection_radio' if is_radio else 'collection_check_boxes'
        name = self.naming.name if is_radio else self.naming.collection_name()

        fragment = Fragment()
        if not is_radio:
            fragment.append(Node('input', {'type': 'hidden', 'name': name, 'value': ''}))

        for entry in entries:
            item_id = self.naming.item_id(entry.value)
            attrs = {'type': item_type, 'value': entry.param}
            attrs.update(self.base_attributes())
            attrs['id'] = item_id
            attrs['name'] = name
            attrs['checked'] = entry.selected
            if entry.disabled:
                attrs['disabled'] = True
            if not is_radio:
                attrs.pop('required', None)
            fragment.append(self.finish(Node('input', attrs)))
            fragment.append(Node('label', {'for': item_id, 'class': label_class}, [Text(entry.label)]))

        logger.debug(f"Rendered {len(entries)} {item_type} items for '{self.attribute}'")
        return fragment
