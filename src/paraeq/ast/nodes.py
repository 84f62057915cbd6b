"""Constructors and accessors for Pandoc JSON AST nodes.

Nodes are plain dicts in the shape pandoc emits with ``--to=json``::

    {"t": "Str", "c": "text"}
    {"t": "Math", "c": [{"t": "DisplayMath"}, "E=mc^2"]}
    {"t": "Span", "c": [["id", ["chem"], [["key", "value"]]], [inlines...]]}
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

Node = Dict[str, Any]
Attr = List[Any]

WHITESPACE_TYPES = ("Space", "SoftBreak", "LineBreak")
DISPLAY_MATH = "DisplayMath"
INLINE_MATH = "InlineMath"


def node_type(node: Any) -> Optional[str]:
    if isinstance(node, dict):
        return node.get("t")
    return None


def attr(identifier: str = "", classes: Optional[List[str]] = None, attributes: Optional[Dict[str, str]] = None) -> Attr:
    kv = [[k, v] for k, v in (attributes or {}).items()]
    return [identifier, list(classes or []), kv]


# Inlines


def Str(text: str) -> Node:
    return {"t": "Str", "c": text}


def Space() -> Node:
    return {"t": "Space"}


def Math(source: str, display: bool = False) -> Node:
    return {"t": "Math", "c": [{"t": DISPLAY_MATH if display else INLINE_MATH}, source]}


def Span(inlines: List[Node], span_attr: Optional[Attr] = None) -> Node:
    return {"t": "Span", "c": [span_attr or attr(), inlines]}


def RawInline(fmt: str, text: str) -> Node:
    return {"t": "RawInline", "c": [fmt, text]}


# Blocks


def Para(inlines: List[Node]) -> Node:
    return {"t": "Para", "c": inlines}


def Plain(inlines: List[Node]) -> Node:
    return {"t": "Plain", "c": inlines}


def Div(blocks: List[Node], div_attr: Optional[Attr] = None) -> Node:
    return {"t": "Div", "c": [div_attr or attr(), blocks]}


def RawBlock(fmt: str, text: str) -> Node:
    return {"t": "RawBlock", "c": [fmt, text]}


# Accessors


def is_whitespace(node: Any) -> bool:
    return node_type(node) in WHITESPACE_TYPES


def is_display_math(node: Any) -> bool:
    if node_type(node) != "Math":
        return False
    content = node.get("c", [])
    return len(content) >= 2 and node_type(content[0]) == DISPLAY_MATH


def math_source(node: Node) -> str:
    return node["c"][1]


def span_classes(node: Node) -> List[str]:
    content = node.get("c", [])
    if len(content) >= 1 and isinstance(content[0], list) and len(content[0]) >= 2:
        return list(content[0][1])
    return []


def has_class(node: Any, cls: str) -> bool:
    return node_type(node) == "Span" and cls in span_classes(node)


def span_content(node: Node) -> List[Node]:
    content = node.get("c", [])
    return content[1] if len(content) >= 2 else []


def cite_ids(node: Node) -> List[str]:
    """Return the cited identifiers of a Cite node, in order."""
    content = node.get("c", [])
    if not content or not isinstance(content[0], list):
        return []
    return [c.get("citationId", "") for c in content[0] if isinstance(c, dict)]


def stringify(inlines: List[Any]) -> str:
    """Flatten inline content to plain text.

    Whitespace nodes become a single blank; formatting containers contribute their text.
    """
    parts: List[str] = []
    for inline in inlines or []:
        t = node_type(inline)
        if t == "Str":
            parts.append(inline.get("c", ""))
        elif t in WHITESPACE_TYPES:
            parts.append(" ")
        elif t in ("Code", "Math", "RawInline"):
            content = inline.get("c", [])
            if len(content) >= 2:
                parts.append(content[1])
        elif t in ("Emph", "Underline", "Strong", "Strikeout", "Superscript", "Subscript", "SmallCaps"):
            parts.append(stringify(inline.get("c", [])))
        elif t in ("Span", "Link", "Cite"):
            content = inline.get("c", [])
            if len(content) >= 2:
                parts.append(stringify(content[1]))
        elif t == "Quoted":
            content = inline.get("c", [])
            if len(content) >= 2:
                quote = '"' if node_type(content[0]) == "DoubleQuote" else "'"
                parts.append(quote + stringify(content[1]) + quote)
    return "".join(parts)
