"""
Component pipeline for form inputs.

A field is rendered as an ordered sequence of named components (label,
input, hint, error, or custom ones). ``compose`` walks the sequence once,
in order, and concatenates what each generator returns. The order given is
authoritative: duplicated names render once per occurrence.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from .exceptions import UnknownComponentError
from .nodes import Fragment, Node, Text

logger = logging.getLogger(__name__)

ComponentGenerator = Callable[[Any], Optional[Node]]

REQUIRED_TEXT = '*'


def render_label(input_obj) -> Optional[Node]:
    """Render the field label, or nothing when ``label`` is False."""
    options = input_obj.options
    if options.get('label') is False:
        return None

    text = input_obj.label_text()
    attrs = {'for': input_obj.label_target(), 'class': input_obj.requirement_classes()}
    label = Node('label', attrs)

    if input_obj.decorates_requirement and input_obj.required:
        title = input_obj.translate_key('formwright.required.text', 'required')
        mark = input_obj.translate_key('formwright.required.mark', REQUIRED_TEXT)
        label.append(Node('abbr', {'title': title}, [Text(mark)]))
        label.append(Text(f" {text}"))
    else:
        label.append(Text(text))

    merge_html(label, options.get('label_html'))
    return label


def render_control(input_obj) -> Node:
    """Render the control itself."""
    return input_obj.render()


def render_hint(input_obj) -> Optional[Node]:
    """Render the hint from the ``hint`` option or translations."""
    if input_obj.options.get('hint') is False:
        return None
    text = input_obj.hint_text()
    if not text:
        return None
    hint = Node('span', {'class': 'hint'}, [Text(text)])
    merge_html(hint, input_obj.options.get('hint_html'))
    return hint


def render_error(input_obj) -> Optional[Node]:
    """Render the first error message reported for the attribute."""
    errors = input_obj.errors
    if not errors or input_obj.options.get('error') is False:
        return None
    error = Node('span', {'class': 'error'}, [Text(errors[0])])
    merge_html(error, input_obj.options.get('error_html'))
    return error


def merge_html(node: Node, extra: Optional[Dict[str, Any]]) -> None:
    """Merge user attributes into a node; classes are appended."""
    for key, value in (extra or {}).items():
        if key == 'class':
            classes = value.split() if isinstance(value, str) else list(value)
            node.add_class(*classes)
        else:
            node.set(key, value)


_COMPONENTS: Dict[str, ComponentGenerator] = {
    'label': render_label,
    'input': render_control,
    'hint': render_hint,
    'error': render_error,
}


def register_component(name: str, generator: ComponentGenerator) -> None:
    """
    Register a custom component generator.

    Args:
        name: Component name used in component sequences
        generator: Callable taking the input and returning a node or None
    """
    _COMPONENTS[str(name)] = generator
    logger.debug(f"Registered component '{name}'")


def unregister_component(name: str) -> None:
    _COMPONENTS.pop(str(name), None)


def available_components() -> List[str]:
    return sorted(_COMPONENTS)


def compose(components: Iterable[Any], input_obj) -> Fragment:
    """
    Render components in order and concatenate them.

    Every name is checked before anything renders, so an unknown name aborts
    the whole composition.

    Args:
        components: Ordered component names
        input_obj: Input being rendered

    Returns:
        Fragment holding each component's output in order

    Raises:
        UnknownComponentError: If a name has no registered generator
    """
    names = [str(name) for name in components]
    for name in names:
        if name not in _COMPONENTS:
            logger.error(f"Unknown component '{name}' in component list {names}")
            raise UnknownComponentError(name, available_components())

    fragment = Fragment()
    for name in names:
        fragment.append(_COMPONENTS[name](input_obj))

    logger.debug(f"Composed components {names} for '{input_obj.attribute}'")
    return fragment
