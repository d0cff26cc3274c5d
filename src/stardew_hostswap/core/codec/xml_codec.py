"""Parse save XML into the attributed tree and write it back out."""

import re
from typing import Any
from xml.parsers import expat

from stardew_hostswap.config import INDENT
from stardew_hostswap.errors import CodecError
from stardew_hostswap.models.document import Document, Element, Text

# Keys of the flattened dict view. Neither can collide with a real tag or attribute name.
ATTRIBUTE_PREFIX = "@_"
TEXT_KEY = "#text"

_DECLARATION_RE = re.compile(r"\s*(<\?xml\s.*?\?>)", re.DOTALL)
# "&" starting an entity or character reference; a bare "&" is left for expat to reject.
_REFERENCE_RE = re.compile(r"&(?=#\d+;|#x[0-9A-Fa-f]+;|[A-Za-z_][\w.-]*;)")
# Inside CDATA every "&" that was a reference now reads "&amp;".
_CDATA_AMPERSAND_RE = re.compile(r"&(?!amp;)")


class _TreeBuilder:
    """Collects expat callbacks into immutable elements."""

    def __init__(self) -> None:
        # (tag, attributes, children) for every open element
        self._stack: list[tuple[str, tuple[tuple[str, str], ...], list[Element | Text]]] = []
        self._text: list[str] = []
        self._in_cdata = False
        self.root: Element | None = None

    def start(self, tag: str, attrs: list[str]) -> None:
        self._flush_text()
        self._stack.append((tag, tuple(zip(attrs[0::2], attrs[1::2], strict=True)), []))

    def end(self, tag: str) -> None:
        self._flush_text()
        _tag, attributes, children = self._stack.pop()
        element = Element(tag, attributes, tuple(children))
        if self._stack:
            self._stack[-1][2].append(element)
        else:
            self.root = element

    def data(self, data: str) -> None:
        if self._in_cdata:
            data = _CDATA_AMPERSAND_RE.sub("&amp;", data)
            data = data.replace("<", "&lt;").replace(">", "&gt;")
        self._text.append(data)

    def start_cdata(self) -> None:
        self._in_cdata = True

    def end_cdata(self) -> None:
        self._in_cdata = False

    def _flush_text(self) -> None:
        if not self._text:
            return
        value = "".join(self._text).strip()
        self._text.clear()
        if value and self._stack:
            self._stack[-1][2].append(Text(value))


def parse(text: str) -> Document:
    """Parse markup text into a Document.

    Values stay textual, surrounding whitespace is trimmed and entity references are
    kept verbatim: "&lt;" in the source is the five characters "&lt;" in the tree.

    Raises:
        CodecError: The text is not well-formed.
    """
    text = text.removeprefix("\ufeff")
    declaration: str | None = None
    body = text
    match = _DECLARATION_RE.match(text)
    if match:
        declaration = match.group(1)
        # Keep line numbers of error messages aligned with the source.
        body = "\n" * match.group(0).count("\n") + text[match.end() :]

    builder = _TreeBuilder()
    parser = expat.ParserCreate()
    parser.ordered_attributes = True
    parser.buffer_text = True
    parser.StartElementHandler = builder.start
    parser.EndElementHandler = builder.end
    parser.CharacterDataHandler = builder.data
    parser.StartCdataSectionHandler = builder.start_cdata
    parser.EndCdataSectionHandler = builder.end_cdata

    try:
        # Escaped references reach the tree as plain text.
        parser.Parse(_REFERENCE_RE.sub("&amp;", body), True)
    except expat.ExpatError as e:
        raise CodecError(f"Malformed XML: {e}", operation="parse") from e

    if builder.root is None:
        raise CodecError("Malformed XML: no root element", operation="parse")
    return Document(root=builder.root, declaration=declaration)


def _quote(value: str) -> str:
    return value.replace('"', "&quot;")


def _start_tag(element: Element) -> str:
    parts = [element.tag]
    parts.extend(f'{name}="{_quote(value)}"' for name, value in element.attributes)
    return "<" + " ".join(parts)


def _write_element(element: Element, depth: int, indent: str, out: list[str]) -> None:
    pad = indent * depth
    head = _start_tag(element)
    if not element.children:
        out.append(f"{pad}{head} />")
        return
    if len(element.children) == 1 and isinstance(element.children[0], Text):
        out.append(f"{pad}{head}>{element.children[0].value}</{element.tag}>")
        return

    out.append(f"{pad}{head}>")
    for child in element.children:
        if isinstance(child, Text):
            out.append(f"{pad}{indent}{child.value}")
        else:
            _write_element(child, depth + 1, indent, out)
    out.append(f"{pad}</{element.tag}>")


def serialize(document: Document, *, indent: str = INDENT) -> str:
    """Write a Document as pretty-printed markup.

    Output is deterministic: one element per line, text-only elements on a single line,
    empty elements as "<tag />" (never dropped), text and attribute values verbatim.
    """
    out: list[str] = []
    if document.declaration:
        out.append(document.declaration)
    _write_element(document.root, 0, indent, out)
    return "\n".join(out) + "\n"


def _flatten_value(element: Element) -> Any:
    if not element.attributes and element.text is not None:
        return element.text

    result: dict[str, Any] = {ATTRIBUTE_PREFIX + name: value for name, value in element.attributes}
    texts: list[str] = []
    for child in element.children:
        if isinstance(child, Text):
            texts.append(child.value)
            continue
        value = _flatten_value(child)
        if child.tag not in result:
            result[child.tag] = value
        elif isinstance(result[child.tag], list):
            result[child.tag].append(value)
        else:
            result[child.tag] = [result[child.tag], value]
    if texts:
        result[TEXT_KEY] = "\n".join(texts)
    return result


def flatten(element: Element) -> dict[str, Any]:
    """Dict view of an element: "@_"-prefixed attributes, "#text" text, lists for repeated tags.

    Note: a tag occurring once maps to a single value, repeated tags map to a list.
    """
    return {element.tag: _flatten_value(element)}
