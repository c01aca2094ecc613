"""Navigation tree models and micro-app identity resolution."""
from __future__ import annotations
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

_RESERVED = {"paths", "contextPath", "context_path", "user"}

class NavItem(BaseModel):
    model_config = ConfigDict(extra="allow")
    id: str

    @property
    def app_id(self) -> str:
        return app_id_of(self.id)

class NavRegion(BaseModel):
    model_config = ConfigDict(extra="allow")
    items: List[NavItem] = Field(default_factory=list)

class NavUser(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    preferred_locale: Optional[str] = Field(default=None, alias="preferredLocale")

class NavTree(BaseModel):
    """Host-supplied navigation tree.

    The raw host object keeps regions as top-level keys next to ``paths``,
    ``contextPath`` and ``user``; validation folds them into ``regions``
    keeping their original order.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    paths: Dict[str, str] = Field(default_factory=dict)
    context_path: Optional[str] = Field(default=None, alias="contextPath")
    user: Optional[NavUser] = None
    regions: Dict[str, NavRegion] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _collect_regions(cls, data):
        if not isinstance(data, Mapping):
            return data
        explicit = data.get("regions")
        if isinstance(explicit, Mapping) and "items" not in explicit:
            return data
        out = {k: v for k, v in data.items() if k in _RESERVED}
        out["regions"] = {
            k: v for k, v in data.items()
            if k not in _RESERVED
            and (isinstance(v, NavRegion) or (isinstance(v, Mapping) and "items" in v))
        }
        return out

def app_id_of(item_id: str) -> str:
    """``"profile.edit"`` -> ``"profile"``; a dot-free id is its own app id."""
    cut = item_id.rfind(".")
    return item_id[:cut] if cut != -1 else item_id

def iter_region_items(tree: NavTree, regions: Iterable[str]) -> Iterator[Tuple[str, NavItem]]:
    # tree order, not allow-list order
    allowed = set(regions)
    for name, region in tree.regions.items():
        if name in allowed:
            for item in region.items:
                yield name, item

def path_matches(prefix: str, cur_path: str) -> bool:
    return re.match(re.escape(prefix) + "/", cur_path, re.IGNORECASE) is not None

def resolve_app_id(tree: Optional[NavTree], cur_path: str, regions: Iterable[str]) -> Optional[str]:
    """Return the id of the first nav item whose app path prefixes ``cur_path``."""
    if tree is None:
        return None
    cur_path = cur_path.lower()
    for _, item in iter_region_items(tree, regions):
        candidate = item.app_id
        if candidate in tree.paths and path_matches(tree.paths[candidate], cur_path):
            return candidate
    return None

class NavigationProvider(ABC):
    """Access to the host page's navigation tree and location."""

    @abstractmethod
    def tree(self) -> Optional[NavTree]:
        """Current tree, or None while the host is not ready."""

    @abstractmethod
    def current_path(self) -> str:
        ...

@dataclass
class StaticNavigation(NavigationProvider):
    nav: Optional[NavTree] = None
    path: str = "/"

    def tree(self) -> Optional[NavTree]:
        return self.nav

    def current_path(self) -> str:
        return self.path
