"""A small HTML tree with simple selector queries."""

from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import Dict, List, Optional

_WHITESPACE = " \t\n\r\f"

_VOID_ELEMENTS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input", "link",
        "meta", "param", "source", "track", "wbr", "keygen", "basefont",
        "bgsound", "frame", "menuitem",
    }
)


@dataclass(frozen=True)
class Selector:
    """Matches elements by tag name, class substring and id."""

    tag: Optional[str] = None
    class_: Optional[str] = None
    id: Optional[str] = None


@dataclass(eq=False)
class Node:
    """An element (``name`` set) or a text node (``name`` is None)."""

    name: Optional[str] = None
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)
    data: str = ""

    @property
    def is_element(self) -> bool:
        return self.name is not None

    @property
    def _is_text(self) -> bool:
        return self.name is None and self.data.strip(_WHITESPACE) != ""

    @property
    def tag(self) -> str:
        """The lower-case tag name, or an empty string for text."""
        return self.name or ""

    def attribute(self, name: str) -> str:
        """The value of an attribute, or an empty string if absent."""
        if not self.is_element:
            return ""
        return self.attributes.get(name, "")

    @property
    def text(self) -> str:
        """Own text, joined from the direct non-blank text children."""
        if self._is_text:
            return self.data
        if not self.is_element:
            return ""
        return "".join(child.data for child in self.children if child._is_text)

    def matches_selector(self, selector: Selector) -> bool:
        """Whether this element satisfies every part of ``selector``."""
        if not self.is_element:
            return False
        if selector.id is not None and selector.id != self.attribute("id"):
            return False
        if selector.tag is not None and selector.tag != self.tag:
            return False
        if selector.class_ is not None and selector.class_ not in self.attribute("class"):
            return False
        return True

    def query_selector_all(self, selector: Selector, depth: Optional[int] = None) -> List["Node"]:
        """All matching descendants in document order.

        ``depth`` limits how many levels below the direct children are
        searched; 0 means direct children only and None means no limit.
        """
        if not self.is_element:
            return []
        found: List[Node] = []
        for child in self.children:
            if not child.is_element:
                continue
            if child.matches_selector(selector):
                found.append(child)
            if depth is None or depth > 0:
                found.extend(
                    child.query_selector_all(selector, None if depth is None else depth - 1)
                )
        return found

    def query_selector(self, selector: Selector) -> Optional["Node"]:
        """The first matching descendant in document order, or None."""
        if not self.is_element:
            return None
        for child in self.children:
            if child.matches_selector(selector):
                return child
            nested = child.query_selector(selector)
            if nested is not None:
                return nested
        return None


class _TreeBuilder(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.root = Node(name="#document")
        self._stack: List[Node] = [self.root]

    def _element(self, tag: str, attrs) -> Node:
        attributes: Dict[str, str] = {}
        for key, value in attrs:
            attributes.setdefault(key, value or "")
        node = Node(name=tag.lower(), attributes=attributes)
        self._stack[-1].children.append(node)
        return node

    def handle_starttag(self, tag, attrs):
        node = self._element(tag, attrs)
        if node.name not in _VOID_ELEMENTS:
            self._stack.append(node)

    def handle_startendtag(self, tag, attrs):
        self._element(tag, attrs)

    def handle_endtag(self, tag):
        tag = tag.lower()
        for position in range(len(self._stack) - 1, 0, -1):
            if self._stack[position].name == tag:
                del self._stack[position:]
                return

    def handle_data(self, data):
        siblings = self._stack[-1].children
        if siblings and not siblings[-1].is_element:
            siblings[-1].data += data
        else:
            siblings.append(Node(data=data))


def parse_html(text: str) -> Node:
    """Parse a document and return its ``html`` element."""
    builder = _TreeBuilder()
    builder.feed(text)
    builder.close()
    root = builder.root
    elements = [child for child in root.children if child.is_element]
    if len(elements) == 1 and elements[0].name == "html":
        return elements[0]
    return Node(name="html", children=root.children)