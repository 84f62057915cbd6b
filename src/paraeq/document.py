from __future__ import annotations

from typing import Any, Dict, List, Optional

from .ast import nodes, walk_document
from .ast.nodes import Node
from .common import OutputFormat
from .config import logger
from .equations import find_labeled_equation
from .registry import EquationRegistry
from .render import render_equation, render_reference


class EquationNumberer:
    """
    Numbers labeled equations of a pandoc JSON document and resolves ``@id`` citations to them.

    Processing is two strictly ordered walks over the same tree: first every paragraph is checked
    for a labeled equation and rewritten, then every citation is resolved against the complete
    identifier table. A citation may therefore appear before the equation it points at.

    :param output_format: Target writer, either an :class:`OutputFormat` or a pandoc writer name.
    """

    def __init__(self, output_format: OutputFormat | str | None = None):
        self.output_format = OutputFormat.from_pandoc(output_format)
        self.registry = EquationRegistry()
        self.resolved: List[str] = []
        self.unresolved: List[str] = []

    def rewrite_paragraph(self, para: Node) -> Optional[Node]:
        """Return the replacement block for a labeled equation paragraph, or None to keep it."""
        eq = find_labeled_equation(para.get("c", []))
        if eq is None:
            return None

        number = self.registry.register(eq.identifier)
        logger.debug(f'Numbered {eq.kind.value} equation "{eq.identifier}" as ({number})')
        return render_equation(eq, number, self.output_format)

    def resolve_citation(self, cite: Node) -> Optional[Node]:
        """Return the rendered reference for a single-id citation of a known label, or None."""
        ids = nodes.cite_ids(cite)
        if len(ids) != 1:
            return None

        identifier = ids[0]
        number = self.registry.lookup(identifier)
        if number is None:
            self.unresolved.append(identifier)
            logger.debug(f'Citation "@{identifier}" does not point at a numbered equation')
            return None

        self.resolved.append(identifier)
        logger.debug(f'Resolved citation "@{identifier}" to equation ({number})')
        return render_reference(identifier, number, self.output_format)

    def process(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        """Rewrite ``doc`` in place and return it.

        The identifier table is rebuilt from scratch on every call.
        """
        self.registry = EquationRegistry()
        self.resolved = []
        self.unresolved = []

        walk_document(doc, {"Para": self.rewrite_paragraph})
        walk_document(doc, {"Cite": self.resolve_citation})

        logger.debug(
            f"Numbered {len(self.registry)} equations and resolved {len(self.resolved)} references "
            f'for output format "{self.output_format.value}"'
        )
        return doc


def number_equations(doc: Dict[str, Any], output_format: OutputFormat | str | None = None) -> Dict[str, Any]:
    """Number the labeled equations of a pandoc JSON document and resolve references to them."""
    return EquationNumberer(output_format).process(doc)
