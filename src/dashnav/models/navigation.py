"""Navigation tree models.

A sidebar entry is either a leaf, which maps to one screen component, or a
branch, which expands to an ordered list of submenu entries. The loose record
shape used by fixture data (``{"menu": ..., "component": ...}`` or
``{"menu": ..., "submenus": [...]}``) is converted with
:func:`parse_navigations`.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from dashnav.core.exceptions import NavigationConfigError


class NavLeaf(BaseModel):
    """Menu entry that renders a screen component when clicked."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["leaf"] = "leaf"
    menu: str = Field(..., min_length=1)
    component: str = Field(..., min_length=1)


class NavBranch(BaseModel):
    """Menu entry that expands to submenu entries."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["branch"] = "branch"
    menu: str = Field(..., min_length=1)
    submenus: tuple["NavEntry", ...] = Field(..., min_length=1)


NavEntry = Annotated[NavLeaf | NavBranch, Field(discriminator="kind")]

NavBranch.model_rebuild()


class PageDescriptor(BaseModel):
    """Routable page: URL fragment plus the marker present when it is active."""

    model_config = ConfigDict(frozen=True)

    url: str
    id: str


class VisitedEntry(BaseModel):
    """One click performed during a navigation walk."""

    model_config = ConfigDict(frozen=True)

    path: tuple[str, ...]
    component: str | None = None
    verified: bool = False

    @property
    def menu(self) -> str:
        return self.path[-1]


def parse_navigation_entry(record: Any) -> NavLeaf | NavBranch:
    """Convert one navigation record into a typed entry.

    Args:
        record: A ``NavLeaf``/``NavBranch`` (returned as is) or a mapping
            with ``menu`` and exactly one of ``component``/``submenus``.

    Raises:
        NavigationConfigError: If the record is not a valid entry.
    """
    if isinstance(record, (NavLeaf, NavBranch)):
        return record
    if not isinstance(record, Mapping):
        raise NavigationConfigError(
            f"Navigation record must be a mapping, got {type(record).__name__}"
        )

    menu = record.get("menu")
    has_component = record.get("component") is not None
    has_submenus = record.get("submenus") is not None

    if has_component == has_submenus:
        raise NavigationConfigError(
            f"Navigation record {menu!r} must have exactly one of "
            "'component' or 'submenus'"
        )

    try:
        if has_component:
            return NavLeaf(menu=menu, component=record["component"])
        return NavBranch(
            menu=menu,
            submenus=tuple(parse_navigation_entry(s) for s in record["submenus"]),
        )
    except PydanticValidationError as e:
        raise NavigationConfigError(f"Invalid navigation record {menu!r}: {e}") from e


def parse_navigations(records: Iterable[Any]) -> tuple[NavLeaf | NavBranch, ...]:
    """Convert a sequence of navigation records, keeping their order."""
    return tuple(parse_navigation_entry(r) for r in records)


def iter_leaves(
    entries: Iterable[NavLeaf | NavBranch],
    parent: tuple[str, ...] = (),
) -> Iterator[tuple[tuple[str, ...], NavLeaf]]:
    """Yield ``(label path, leaf)`` for every leaf, depth first."""
    for entry in entries:
        path = (*parent, entry.menu)
        if isinstance(entry, NavBranch):
            yield from iter_leaves(entry.submenus, path)
        else:
            yield path, entry
