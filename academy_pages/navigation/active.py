"""Work out which navigation entry a page belongs to.

Every function here is a pure function of ``(page_path, nodes)``; nothing is
recorded on the nodes themselves, so one navigation tree can serve any number
of concurrent renders.

Example
-------
>>> from academy_pages.navigation.models import NavigationNode
>>> teaching = NavigationNode("Teaching", "teaching/index.html", "teaching/")
>>> find_active_node("teaching/courses/intro.html", [teaching]).label
'Teaching'
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import NavigationModel, NavigationNode


def match_length(page_path: str, node: NavigationNode) -> int | None:
    """Return the length of ``node``'s key matched by ``page_path``, if any.

    Directory keys (ending in ``/``) match as prefixes; page keys, including
    the site root's ``index.html``, must match exactly.
    """
    key = node.match_key
    if not key:
        return None
    if key.endswith("/"):
        return len(key) if page_path.startswith(key) else None
    return len(key) if page_path == key else None


def _target_length(node: NavigationNode) -> int:
    return len(node.target or "")


def find_active_node(
    page_path: str, nodes: cabc.Iterable[NavigationNode]
) -> NavigationNode | None:
    """Return the most specific node matching ``page_path``.

    ``nodes`` are roots; their descendants are searched in pre-order. The
    longest matching key wins. Equal key lengths go to the node with the
    longer target (``stats.html#setup`` beats ``stats.html``), and complete
    ties keep the earlier node.
    """
    best: NavigationNode | None = None
    best_rank = (-1, -1)
    for root in nodes:
        for node in root.iter_nodes():
            length = match_length(page_path, node)
            if length is None:
                continue
            rank = (length, _target_length(node))
            if rank > best_rank:
                best, best_rank = node, rank
    return best


def active_trail(
    page_path: str, nodes: cabc.Sequence[NavigationNode]
) -> tuple[NavigationNode, ...]:
    """Return the chain of nodes from a root down to the active node."""
    active = find_active_node(page_path, nodes)
    if active is None:
        return ()
    for root in nodes:
        trail = _path_to(root, active)
        if trail:
            return tuple(trail)
    return ()


def section_for(page_path: str, model: NavigationModel) -> NavigationNode | None:
    """Return the sidebar section whose subtree contains the active entry."""
    trail = active_trail(page_path, model.sections)
    return trail[0] if trail else None


def _path_to(node: NavigationNode, wanted: NavigationNode) -> list[NavigationNode]:
    if node is wanted:
        return [node]
    for child in node.children:
        below = _path_to(child, wanted)
        if below:
            return [node, *below]
    return []


__all__ = ["active_trail", "find_active_node", "match_length", "section_for"]
