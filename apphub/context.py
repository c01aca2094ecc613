from __future__ import annotations
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union
from pydantic import ValidationError

from .config import HubCfg
from .events import EventBus, NotificationMessage, alert_style
from .navigation import NavigationProvider, resolve_app_id
from .storage import KeyValueStore, MemoryStore

log = logging.getLogger(__name__)

@dataclass
class AppContext:
    """What a micro-app knows about itself and the page it shares.

    Identity comes from the navigation tree, state lives in the session
    store namespaced as ``<app id>:<key>``, and notifications go out on the bus.
    """
    nav: NavigationProvider
    store: KeyValueStore = field(default_factory=MemoryStore)
    bus: EventBus = field(default_factory=EventBus)
    cfg: HubCfg = field(default_factory=HubCfg)

    # ── identity ──────────────────────────────────────────────
    def current_app_id(self) -> Optional[str]:
        return resolve_app_id(self.nav.tree(), self.nav.current_path(), self.cfg.regions)

    def context_path(self) -> str:
        tree = self.nav.tree()
        return tree.context_path if tree and tree.context_path else ""

    def resolve_path(self, app_id: Optional[str] = None) -> str:
        """Path of ``app_id`` (default: current app), else the context path."""
        app = app_id or self.current_app_id()
        tree = self.nav.tree()
        if tree is not None and app and tree.paths.get(app):
            return tree.paths[app]
        return self.context_path()

    def is_app_available(self, app_id: Optional[str]) -> bool:
        # an app mounted at the context path itself reads as unavailable
        return self.resolve_path(app_id) != self.context_path()

    def get_preferred_locale(self) -> str:
        tree = self.nav.tree()
        if tree and tree.user and tree.user.preferred_locale:
            return tree.user.preferred_locale
        return ""

    # ── scoped store ──────────────────────────────────────────
    def _key(self, key: str, app_id: Optional[str]) -> str:
        app = app_id or self.current_app_id()
        return f"{app if app is not None else 'null'}:{key}"

    def set_value(self, key: str, value: Any, app_id: Optional[str] = None) -> None:
        self.store.set_item(self._key(key, app_id), json.dumps(value))

    def get_value(self, key: str, app_id: Optional[str] = None) -> Any:
        """Stored value, or ``{}`` when nothing (or nothing readable) is there."""
        k = self._key(key, app_id)
        raw = self.store.get_item(k)
        if raw is None:
            return {}
        try:
            return json.loads(raw)
        except ValueError:
            log.warning("Discarding unreadable value under %s", k)
            return {}

    def has_value(self, key: str, app_id: Optional[str] = None) -> bool:
        return self.store.has_item(self._key(key, app_id))

    def remove_value(self, key: str, app_id: Optional[str] = None) -> None:
        self.store.remove_item(self._key(key, app_id))

    def set_shared_state(self, partial: Mapping[str, Any]) -> None:
        """Shallow-merge ``partial`` into the cross-app state.

        Read-modify-write without locking: two writers racing lose one update.
        """
        if not isinstance(partial, Mapping):
            log.error("set_shared_state() called without a mapping: %r", type(partial).__name__)
            return
        state = self.get_shared_state()
        if not isinstance(state, dict):
            log.warning("Replacing non-object shared state %r", state)
            state = {}
        state.update(partial)
        self.set_value(self.cfg.state_key, state, self.cfg.global_key)

    def get_shared_state(self) -> Dict[str, Any]:
        return self.get_value(self.cfg.state_key, self.cfg.global_key)

    # ── notifications ─────────────────────────────────────────
    def notify(self, message: Union[NotificationMessage, Mapping[str, Any]]) -> None:
        if not isinstance(message, NotificationMessage):
            try:
                message = NotificationMessage.model_validate(message)
            except ValidationError as exc:
                log.error("notify() called with an unusable message: %s", exc)
                return
        self.bus.emit(self.cfg.event_name, {"message": message})

    def alert(self, kind: str, text: str) -> NotificationMessage:
        colour, icon = alert_style(kind)
        message = NotificationMessage(text=text, type=colour, icon=icon, is_persistent=False)
        self.notify(message)
        return message

    def clear_all_notifications(self) -> None:
        self.bus.emit(self.cfg.event_name, {"message": None, "action": "removeAll"})
