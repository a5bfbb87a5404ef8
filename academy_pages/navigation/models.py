"""Immutable navigation tree shared by every page render."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc


@dc.dataclass(frozen=True, slots=True, eq=False)
class NavigationNode:
    """One menu or sidebar entry.

    Attributes
    ----------
    label : str
        Text shown for the entry.
    target : str or None
        Output path of the linked page, an external URL, or ``None`` for a
        pure container without a page of its own.
    match_key : str or None
        Path used for active-state matching. Index pages and containers use
        their directory with a trailing slash; the site root index uses
        ``index.html`` and other pages their output path. External links and
        a root container without an index page have none.
    external : bool
        True when ``target`` is an absolute URL passed through untouched.
    icon : str or None
        Optional icon name for the theme.
    new_window : bool
        Open the link in a new browser tab.
    children : tuple[NavigationNode, ...]
        Child entries in declared order.
    """

    label: str
    target: str | None
    match_key: str | None = None
    external: bool = False
    icon: str | None = None
    new_window: bool = False
    children: tuple[NavigationNode, ...] = ()

    @property
    def is_container(self) -> bool:
        return self.target is None

    def iter_nodes(self) -> cabc.Iterator[NavigationNode]:
        """Yield this node and its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()


@dc.dataclass(frozen=True, slots=True)
class NavigationModel:
    """Resolved navbar, sidebar sections, and footer links."""

    navbar_left: tuple[NavigationNode, ...] = ()
    navbar_right: tuple[NavigationNode, ...] = ()
    tools: tuple[NavigationNode, ...] = ()
    sections: tuple[NavigationNode, ...] = ()
    footer_links: tuple[NavigationNode, ...] = ()

    @property
    def navbar(self) -> tuple[NavigationNode, ...]:
        return self.navbar_left + self.navbar_right

    def roots(self) -> tuple[NavigationNode, ...]:
        """Return every top-level node in display order."""
        return (
            self.navbar_left
            + self.navbar_right
            + self.tools
            + self.sections
            + self.footer_links
        )

    def iter_nodes(self) -> cabc.Iterator[NavigationNode]:
        for root in self.roots():
            yield from root.iter_nodes()


__all__ = ["NavigationModel", "NavigationNode"]
