import pathlib

from paraeq.ast import nodes

this_dir = pathlib.Path(__file__).resolve().absolute().parent
files_dir = (this_dir / ".." / "files").resolve().absolute()

NBSP = "\u00a0"


def words(text):
    """Split text into Str/Space inlines the way pandoc's markdown reader does."""
    inlines = []
    for i, word in enumerate(text.split(" ")):
        if i > 0:
            inlines.append(nodes.Space())
        if word:
            inlines.append(nodes.Str(word))
    return inlines


def display_math_para(source, label=None):
    inlines = [nodes.Math(source, display=True)]
    if label is not None:
        inlines += [nodes.Space(), nodes.Str(f"{{#{label}}}")]
    return nodes.Para(inlines)


def chem_span(formula):
    return nodes.Span([nodes.Str(formula)], nodes.attr(classes=["chem"]))


def chem_para(formula, label=None):
    inlines = [chem_span(formula)]
    if label is not None:
        inlines += [nodes.Space(), nodes.Str(f"{{#{label}}}")]
    return nodes.Para(inlines)


def cite(*ids):
    citations = [
        {
            "citationId": i,
            "citationPrefix": [],
            "citationSuffix": [],
            "citationMode": {"t": "AuthorInText"},
            "citationNoteNum": 1,
            "citationHash": 0,
        }
        for i in ids
    ]
    text = "; ".join(f"@{i}" for i in ids)
    return {"t": "Cite", "c": [citations, [nodes.Str(text)]]}


def make_doc(*blocks):
    return {"pandoc-api-version": [1, 23, 1], "meta": {}, "blocks": list(blocks)}


def iter_inlines(tree, node_type):
    """Yield every node of ``node_type`` in document order."""
    if isinstance(tree, list):
        for item in tree:
            yield from iter_inlines(item, node_type)
    elif isinstance(tree, dict):
        if tree.get("t") == node_type:
            yield tree
        for value in tree.values():
            if isinstance(value, (list, dict)):
                yield from iter_inlines(value, node_type)
