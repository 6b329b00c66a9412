"""
Render output tree for form inputs.

Inputs never build markup strings directly; they return a tree of ``Node``
elements and ``Text`` leaves that the host layer serializes. ``to_html`` is a
minimal serializer used by the preview app and the tests.

Attribute values follow HTML boolean semantics: ``True`` renders as a bare
attribute, ``False`` and ``None`` are dropped.
"""

from html import escape
from typing import Any, Dict, Iterator, List, Optional, Union

VOID_ELEMENTS = {
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'source', 'track', 'wbr'
}


class Text:
    """Text leaf, escaped on serialization."""

    __slots__ = ('text',)

    def __init__(self, text: Any):
        self.text = '' if text is None else str(text)

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Text) and other.text == self.text

    def __repr__(self) -> str:
        return f"Text({self.text!r})"

    def text_content(self) -> str:
        return self.text


class Node:
    """
    Element node.

    Attributes:
        tag: Element name
        attributes: Ordered attribute map (str -> str | bool)
        children: Child nodes and text leaves
    """

    def __init__(self, tag: str, attributes: Optional[Dict[str, Any]] = None,
                 children: Optional[List[Union['Node', Text]]] = None):
        self.tag = tag
        self.attributes: Dict[str, Any] = {}
        for key, value in (attributes or {}).items():
            self.set(key, value)
        self.children: List[Union[Node, Text]] = []
        for child in children or []:
            self.append(child)

    def set(self, key: str, value: Any) -> None:
        """Set an attribute, normalizing scalars to strings."""
        if value is None or value is False:
            self.attributes.pop(key, None)
        elif value is True:
            self.attributes[key] = True
        elif isinstance(value, (list, tuple)):
            joined = ' '.join(str(v) for v in value if v)
            if joined:
                self.attributes[key] = joined
            else:
                self.attributes.pop(key, None)
        else:
            self.attributes[key] = str(value)

    def append(self, child: Any) -> None:
        if child is None:
            return
        if isinstance(child, Fragment):
            self.children.extend(child.children)
        elif isinstance(child, (Node, Text)):
            self.children.append(child)
        else:
            self.children.append(Text(child))

    @property
    def classes(self) -> List[str]:
        value = self.attributes.get('class')
        return value.split() if isinstance(value, str) else []

    def add_class(self, *names: str) -> None:
        current = self.classes
        for name in names:
            if name and name not in current:
                current.append(name)
        self.set('class', current)

    def iter(self) -> Iterator['Node']:
        """Depth-first iteration over this node and all descendant elements."""
        yield self
        for child in self.children:
            if isinstance(child, Node):
                yield from child.iter()

    def find_all(self, tag: Optional[str] = None, **attrs: Any) -> List['Node']:
        """
        Find descendant elements (including self) matching a tag and attributes.

        Attribute names use a trailing underscore for reserved words
        (``class_``, ``for_``). ``class_`` matches when every listed class is
        present; ``True`` matches any present value.

        Args:
            tag: Element name or None for any element
            **attrs: Attribute filters

        Returns:
            Matching nodes in document order
        """
        matches = []
        for node in self.iter():
            if tag is not None and node.tag != tag:
                continue
            if all(node._matches(name.rstrip('_'), expected) for name, expected in attrs.items()):
                matches.append(node)
        return matches

    def find(self, tag: Optional[str] = None, **attrs: Any) -> Optional['Node']:
        found = self.find_all(tag, **attrs)
        return found[0] if found else None

    def _matches(self, name: str, expected: Any) -> bool:
        if name == 'class':
            wanted = expected.split() if isinstance(expected, str) else list(expected)
            return all(c in self.classes for c in wanted)
        actual = self.attributes.get(name)
        if expected is True:
            return actual is not None
        if expected is None or expected is False:
            return actual is None
        return actual == str(expected)

    def text_content(self) -> str:
        return ''.join(child.text_content() for child in self.children)

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Node)
            and other.tag == self.tag
            and other.attributes == self.attributes
            and other.children == self.children
        )

    def __repr__(self) -> str:
        return f"Node({self.tag!r}, {self.attributes!r}, {len(self.children)} children)"


class Fragment(Node):
    """Ordered group of sibling nodes with no element of its own."""

    def __init__(self, children: Optional[List[Union[Node, Text]]] = None):
        super().__init__('', None, children)

    def iter(self) -> Iterator[Node]:
        for child in self.children:
            if isinstance(child, Node):
                yield from child.iter()

    def __repr__(self) -> str:
        return f"Fragment({len(self.children)} children)"


def to_html(node: Union[Node, Text, None]) -> str:
    """
    Serialize a render tree to markup.

    Args:
        node: Root node, text leaf or None

    Returns:
        HTML string
    """
    if node is None:
        return ''
    if isinstance(node, Text):
        return escape(node.text, quote=False)
    if isinstance(node, Fragment):
        return ''.join(to_html(child) for child in node.children)

    parts = [f"<{node.tag}"]
    for key, value in node.attributes.items():
        if value is True:
            parts.append(f" {key}")
        else:
            parts.append(f' {key}="{escape(value, quote=True)}"')
    parts.append('>')

    if node.tag in VOID_ELEMENTS:
        return ''.join(parts)

    parts.extend(to_html(child) for child in node.children)
    parts.append(f"</{node.tag}>")
    return ''.join(parts)
