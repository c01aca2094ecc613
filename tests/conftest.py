import pytest

from apphub.context import AppContext
from apphub.events import EventBus
from apphub.navigation import NavTree, StaticNavigation
from apphub.storage import MemoryStore

NAV = {
    "contextPath": "/tenant",
    "user": {"preferredLocale": "de-DE"},
    "paths": {
        "profile": "/app/profile",
        "analytics": "/app/analytics",
        "settings": "/app/settings",
    },
    "main": {"items": [{"id": "analytics.dashboard"}, {"id": "profile.edit"}]},
    "settings": {"items": [{"id": "settings.general"}]},
    "footer": {"items": [{"id": "legal.terms"}]},
}

@pytest.fixture
def nav_tree() -> NavTree:
    return NavTree.model_validate(NAV)

@pytest.fixture
def nav(nav_tree) -> StaticNavigation:
    return StaticNavigation(nav=nav_tree, path="/app/profile/edit")

@pytest.fixture
def events():
    bus = EventBus()
    seen = []
    bus.subscribe("apphub.notify", seen.append)
    return bus, seen

@pytest.fixture
def ctx(nav, events) -> AppContext:
    return AppContext(nav=nav, store=MemoryStore(), bus=events[0])
