from pathlib import Path
from typing import List
from pydantic import BaseModel, Field
import yaml

from .navigation import NavTree

class HubCfg(BaseModel):
    global_key: str = Field("_apphub", min_length=1)    # reserved app id for cross-app state
    state_key: str = Field("state", min_length=1)
    regions: List[str] = Field(default_factory=lambda: ["main", "settings", "profile"])
    event_name: str = "apphub.notify"

def _read_yaml(path: Path):
    with path.open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh) or {}

def load_config(path: Path) -> HubCfg:
    return HubCfg.model_validate(_read_yaml(path))

def load_navigation(path: Path) -> NavTree:
    """Read a navigation tree dump (YAML or JSON, JSON being valid YAML)."""
    return NavTree.model_validate(_read_yaml(path))
