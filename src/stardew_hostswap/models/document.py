"""Immutable attributed tree for save documents.

Elements are frozen; every "modifying" helper returns a new element and shares the
untouched children with the original.
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Text:
    """Text content of an element, exactly as written in the source (entities not decoded)."""

    value: str


@dataclass(frozen=True)
class Element:
    """A single markup element."""

    tag: str
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple["Element | Text", ...] = ()

    @property
    def attrib(self) -> dict[str, str]:
        """Attributes as an insertion-ordered dict (a fresh copy)."""
        return dict(self.attributes)

    def get_attribute(self, name: str, default: str | None = None) -> str | None:
        for key, value in self.attributes:
            if key == name:
                return value
        return default

    @property
    def text(self) -> str | None:
        """Text of a text-only element.

        Returns "" for an empty element and None when the element has child elements.
        """
        if any(isinstance(c, Element) for c in self.children):
            return None
        return "".join(c.value for c in self.children if isinstance(c, Text))

    def elements(self) -> tuple["Element", ...]:
        """Child elements, in document order."""
        return tuple(c for c in self.children if isinstance(c, Element))

    def find(self, tag: str) -> "Element | None":
        """Return the first child element named tag."""
        for child in self.children:
            if isinstance(child, Element) and child.tag == tag:
                return child
        return None

    def find_all(self, tag: str) -> tuple["Element", ...]:
        """Return all child elements named tag; a single occurrence is a 1-tuple."""
        return tuple(c for c in self.children if isinstance(c, Element) and c.tag == tag)

    def find_text(self, tag: str) -> str | None:
        """Text of the first child named tag, or None if there is no such text-only child."""
        child = self.find(tag)
        return child.text if child is not None else None

    def with_tag(self, tag: str) -> "Element":
        return self if tag == self.tag else replace(self, tag=tag)

    def with_children(self, children: Iterable["Element | Text"]) -> "Element":
        return replace(self, children=tuple(children))

    def with_text(self, value: str) -> "Element":
        return replace(self, children=(Text(value),) if value else ())

    def with_attributes(self, attributes: Iterable[tuple[str, str]]) -> "Element":
        return replace(self, attributes=tuple(attributes))

    def set_child(self, tag: str, new: "Element | None") -> "Element":
        """Put new in place of the first child named tag.

        The child is removed when new is None and appended when there is no such child yet.
        """
        children = list(self.children)
        for i, child in enumerate(children):
            if isinstance(child, Element) and child.tag == tag:
                if new is None:
                    del children[i]
                else:
                    children[i] = new
                return self.with_children(children)
        if new is None:
            return self
        return self.with_children([*children, new])

    def replace_nth(self, tag: str, index: int, new: "Element") -> "Element":
        """Replace the index-th child named tag (counting only children with that tag)."""
        seen = 0
        children = list(self.children)
        for i, child in enumerate(children):
            if isinstance(child, Element) and child.tag == tag:
                if seen == index:
                    children[i] = new
                    return self.with_children(children)
                seen += 1
        msg = f"No {tag!r} child at position {index}"
        raise IndexError(msg)


@dataclass(frozen=True)
class Document:
    """A parsed document: optional XML declaration plus the root element."""

    root: Element
    declaration: str | None = None

    def with_root(self, root: Element) -> "Document":
        return replace(self, root=root)
