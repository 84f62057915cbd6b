from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Union

from .nodes import Node

Action = Callable[[Node], Optional[Union[Node, List[Node]]]]


def walk(tree: Any, actions: Dict[str, Action]) -> Any:
    """Apply ``actions`` (keyed by node type) to every node of ``tree``, rewriting it in place.

    Traversal is depth-first in document order and children are visited before their parent,
    so a replacement node returned by an action is never visited again. An action returns
    None to keep the node, a node to replace it, or a list of nodes to splice in its place.
    """
    if isinstance(tree, list):
        out = []
        for item in tree:
            if isinstance(item, dict) and "t" in item:
                walk(item, actions)
                action = actions.get(item["t"])
                result = action(item) if action is not None else None
                if result is None:
                    out.append(item)
                elif isinstance(result, list):
                    out.extend(result)
                else:
                    out.append(result)
            else:
                out.append(walk(item, actions))
        tree[:] = out
    elif isinstance(tree, dict):
        for value in tree.values():
            if isinstance(value, (list, dict)):
                walk(value, actions)
    return tree


def walk_document(doc: Dict[str, Any], actions: Dict[str, Action]) -> Dict[str, Any]:
    """Walk a pandoc JSON document: metadata values first, then the body blocks, as pandoc does."""
    walk(doc.get("meta", {}), actions)
    walk(doc.get("blocks", []), actions)
    return doc
