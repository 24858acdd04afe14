"""Domain models for dashnav."""

from dashnav.models.navigation import (
    NavBranch,
    NavEntry,
    NavLeaf,
    PageDescriptor,
    VisitedEntry,
    iter_leaves,
    parse_navigations,
)

__all__ = [
    "NavBranch",
    "NavEntry",
    "NavLeaf",
    "PageDescriptor",
    "VisitedEntry",
    "iter_leaves",
    "parse_navigations",
]
