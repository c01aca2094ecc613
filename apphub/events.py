"""Notification messages and the page-wide event bus they travel on."""
from __future__ import annotations
import logging
from collections import defaultdict
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)

Listener = Callable[[Dict[str, Any]], Any]

class NotificationMessage(BaseModel):
    """A toast/banner request for the notification renderer.

    ``type`` is a colour (blue, red, orange, green) and ``icon`` a font-awesome
    name. Supply ``action_callback`` or ``action_link``, not both; which one
    wins when both are set is up to the renderer.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    text: str
    type: str = "blue"
    icon: str = "info"
    is_persistent: bool = Field(default=False, alias="isPersistent")
    timestamp: Optional[str] = None
    action_label: Optional[str] = Field(default=None, alias="actionLabel")
    action_callback: Optional[Callable[[], Any]] = Field(default=None, alias="actionCallback", exclude=True)
    action_link: Optional[str] = Field(default=None, alias="actionLink")

class AlertKind(str, Enum):
    ERROR = "ERROR"
    INFO = "INFO"
    SUCCESS = "SUCCESS"

ALERT_STYLES: Dict[AlertKind, Tuple[str, str]] = {
    AlertKind.ERROR: ("red", "warning"),
    AlertKind.INFO: ("blue", "info"),
    AlertKind.SUCCESS: ("green", "check"),
}

def alert_style(kind: str) -> Tuple[str, str]:
    """(type, icon) for an alert kind; unknown kinds look like INFO."""
    try:
        return ALERT_STYLES[AlertKind(kind.upper())]
    except ValueError:
        return ALERT_STYLES[AlertKind.INFO]

class EventBus:
    """Synchronous pub/sub channel shared by every app on the page."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)

    def subscribe(self, name: str, listener: Listener) -> None:
        self._listeners[name].append(listener)

    def unsubscribe(self, name: str, listener: Listener) -> None:
        listeners = self._listeners.get(name)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def emit(self, name: str, detail: Dict[str, Any]) -> int:
        """Deliver ``detail`` to every listener of ``name``; returns how many ran.

        A failing listener is logged and does not stop the others.
        """
        listeners = list(self._listeners.get(name, []))
        for listener in listeners:
            try:
                listener(detail)
            except Exception:
                log.exception("listener %r for %s failed", listener, name)
        return len(listeners)
