"""Recognition of labeled equation paragraphs.

Three paragraph shapes carry a label:

* display math followed by a ``{#id}`` token, e.g. ``$$E=mc^2$$ {#eq:energy}``
* a standalone chemical formula span, e.g. ``[2H2 + O2 -> 2H2O]{.chem} {#eq:water}``
* the legacy bracket spelling of the same, e.g. ``ce{2H2 + O2 -> 2H2O} {#eq:water}``

Every finder returns a :class:`LabeledEquation` or None. None is the only failure mode.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .ast import nodes
from .ast.nodes import Node
from .common import CHEM_CLASS, LEGACY_CHEM_MARKER

LABEL_RE = re.compile(r"\{#([^}]+)\}")


class EquationKind(str, Enum):
    MATH = "math"
    CHEM = "chem"


class ChemSpelling(str, Enum):
    SPAN = "span"
    LEGACY = "legacy"


@dataclass(frozen=True)
class LabeledEquation:
    kind: EquationKind
    source: str
    identifier: str
    spelling: Optional[ChemSpelling] = None

    @property
    def is_chem(self) -> bool:
        return self.kind is EquationKind.CHEM

    def to_inline(self) -> Node:
        """The equation as a single inline, in the author's original spelling."""
        if not self.is_chem:
            return nodes.Math(self.source)
        if self.spelling is ChemSpelling.LEGACY:
            return nodes.Str(f"{LEGACY_CHEM_MARKER}{{{self.source}}}")
        return nodes.Span([nodes.Str(self.source)], nodes.attr(classes=[CHEM_CLASS]))

    def to_latex_body(self) -> str:
        if self.is_chem:
            return f"\\ce{{{self.source}}}"
        return self.source


def find_display_math(inlines: List[Node]) -> Optional[LabeledEquation]:
    """Find the first display math node and the first ``{#id}`` token after it."""
    math_el = None
    for el in inlines:
        if math_el is None:
            if nodes.is_display_math(el):
                math_el = el
        elif nodes.node_type(el) == "Str":
            m = LABEL_RE.fullmatch(el.get("c", ""))
            if m:
                return LabeledEquation(EquationKind.MATH, nodes.math_source(math_el), m.group(1))
    return None


def _label_only(text: str) -> Optional[str]:
    """Return the identifier if ``text`` holds a ``{#id}`` label and nothing else but whitespace."""
    m = LABEL_RE.search(text)
    if m is None:
        return None
    if text[: m.start()].strip() or text[m.end() :].strip():
        return None
    return m.group(1)


def _flatten_plain(inlines: List[Node]) -> Optional[str]:
    # None when anything other than text or whitespace is present
    parts = []
    for el in inlines:
        t = nodes.node_type(el)
        if t == "Str":
            parts.append(el.get("c", ""))
        elif t in ("Space", "SoftBreak"):
            parts.append(" ")
        else:
            return None
    return "".join(parts)


def find_chem_equation(inlines: List[Node]) -> Optional[LabeledEquation]:
    """Match a paragraph made of a ``.chem`` span followed by a ``{#id}`` label and nothing else.

    Chemical formulas mentioned inside ordinary prose are never matched.
    """
    span_idx = None
    for i, el in enumerate(inlines):
        if nodes.node_type(el) in ("Space", "SoftBreak"):
            continue
        if nodes.has_class(el, CHEM_CLASS):
            span_idx = i
            break
        return None

    if span_idx is None:
        return None

    formula = nodes.stringify(nodes.span_content(inlines[span_idx]))
    rest = _flatten_plain(inlines[span_idx + 1 :])
    if rest is None:
        return None

    identifier = _label_only(rest)
    if identifier is None:
        return None
    return LabeledEquation(EquationKind.CHEM, formula, identifier, ChemSpelling.SPAN)


def scan_balanced(text: str, start: int, open_char: str = "{", close_char: str = "}") -> Optional[int]:
    """Return the index of the delimiter closing the one at ``start``, or None if unbalanced."""
    if start >= len(text) or text[start] != open_char:
        return None
    depth = 0
    for i in range(start, len(text)):
        char = text[i]
        if char == open_char:
            depth += 1
        elif char == close_char:
            depth -= 1
            if depth == 0:
                return i
    return None


def split_legacy_chem(text: str) -> Optional[Tuple[str, str]]:
    """Split ``ce{formula} rest`` into ``(formula, rest)``."""
    stripped = text.lstrip()
    if not stripped.startswith(LEGACY_CHEM_MARKER + "{"):
        return None
    open_idx = len(LEGACY_CHEM_MARKER)
    close_idx = scan_balanced(stripped, open_idx)
    if close_idx is None:
        return None
    return stripped[open_idx + 1 : close_idx], stripped[close_idx + 1 :]


def find_legacy_chem_equation(inlines: List[Node]) -> Optional[LabeledEquation]:
    text = _flatten_plain(inlines)
    if text is None:
        return None

    parts = split_legacy_chem(text)
    if parts is None:
        return None

    formula, rest = parts
    identifier = _label_only(rest)
    if identifier is None:
        return None
    return LabeledEquation(EquationKind.CHEM, formula, identifier, ChemSpelling.LEGACY)


FINDERS = (find_display_math, find_chem_equation, find_legacy_chem_equation)


def find_labeled_equation(inlines: List[Node]) -> Optional[LabeledEquation]:
    """Try each paragraph shape in priority order; display math always wins."""
    for finder in FINDERS:
        eq = finder(inlines)
        if eq is not None:
            return eq
    return None
