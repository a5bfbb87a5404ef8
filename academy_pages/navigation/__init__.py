"""Navigation tree construction and active-entry matching."""

from .active import active_trail, find_active_node, match_length, section_for
from .builder import NavigationBuilder
from .models import NavigationModel, NavigationNode

__all__ = [
    "NavigationBuilder",
    "NavigationModel",
    "NavigationNode",
    "active_trail",
    "find_active_node",
    "match_length",
    "section_for",
]
