from __future__ import annotations

from .ast import nodes
from .ast.nodes import Node
from .common import HTML_CENTER_STYLE, HTML_GRID_STYLE, HTML_RIGHT_STYLE, OutputFormat
from .equations import LabeledEquation


def render_latex(eq: LabeledEquation) -> Node:
    latex = f"\n\\begin{{equation}}\n{eq.to_latex_body()}\n\\label{{{eq.identifier}}}\n\\end{{equation}}\n"
    return nodes.RawBlock("latex", latex)


def render_html(eq: LabeledEquation, number: int) -> Node:
    """Three column grid: empty cell, centered equation, right aligned number."""
    left_div = nodes.Div([])
    eq_div = nodes.Div(
        [nodes.Plain([eq.to_inline()])],
        nodes.attr(attributes={"style": HTML_CENTER_STYLE}),
    )
    right_div = nodes.Div(
        [nodes.Plain([nodes.Str(f"({number})")])],
        nodes.attr(attributes={"style": HTML_RIGHT_STYLE}),
    )
    return nodes.Div([left_div, eq_div, right_div], nodes.attr(attributes={"style": HTML_GRID_STYLE}))


def render_inline(eq: LabeledEquation, number: int, output_format: OutputFormat) -> Node:
    num_str = f"{output_format.number_padding}({number})"
    return nodes.Para([eq.to_inline(), nodes.Str(num_str)])


def render_equation(eq: LabeledEquation, number: int, output_format: OutputFormat) -> Node:
    """Build the block replacing a labeled equation paragraph."""
    if output_format is OutputFormat.LATEX:
        return render_latex(eq)
    if output_format is OutputFormat.HTML:
        return render_html(eq, number)
    return render_inline(eq, number, output_format)


def render_reference(identifier: str, number: int, output_format: OutputFormat) -> Node:
    # latex resolves the printed number itself
    if output_format is OutputFormat.LATEX:
        return nodes.RawInline("latex", f"\\ref{{{identifier}}}")
    return nodes.Str(str(number))
