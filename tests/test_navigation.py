import pytest

from apphub.navigation import NavItem, NavRegion, NavTree, app_id_of, iter_region_items, resolve_app_id

REGIONS = ["main", "settings", "profile"]

def test_profile_edit_example():
    tree = NavTree.model_validate({"main": {"items": [{"id": "profile.edit"}]}, "paths": {"profile": "/app/profile"}})
    assert resolve_app_id(tree, "/app/profile/edit", REGIONS) == "profile"

@pytest.mark.parametrize("item_id, expected", [
    ("profile.edit", "profile"),
    ("a.b.c", "a.b"),
    ("standalone", "standalone"),
    (".hidden", ""),
])
def test_app_id_of(item_id, expected):
    assert app_id_of(item_id) == expected

def test_dot_free_item_resolves_to_whole_id():
    tree = NavTree.model_validate({"main": {"items": [{"id": "reports"}]}, "paths": {"reports": "/r"}})
    assert resolve_app_id(tree, "/r/daily", REGIONS) == "reports"

def test_regions_keep_tree_order(nav_tree):
    assert list(nav_tree.regions) == ["main", "settings", "footer"]
    assert nav_tree.context_path == "/tenant"
    assert nav_tree.user.preferred_locale == "de-DE"

def test_scan_skips_regions_outside_allow_list(nav_tree):
    pairs = [(r, i.id) for r, i in iter_region_items(nav_tree, REGIONS)]
    assert pairs == [
        ("main", "analytics.dashboard"),
        ("main", "profile.edit"),
        ("settings", "settings.general"),
    ]

def test_scan_follows_tree_order_not_allow_list_order():
    tree = NavTree.model_validate({
        "profile": {"items": [{"id": "me.view"}]},
        "main": {"items": [{"id": "home.view"}]},
        "paths": {"me": "/x", "home": "/x"},
    })
    assert resolve_app_id(tree, "/x/y", ["main", "profile"]) == "me"

def test_first_match_wins():
    tree = NavTree.model_validate({
        "main": {"items": [{"id": "a.one"}, {"id": "b.two"}]},
        "settings": {"items": [{"id": "c.three"}]},
        "paths": {"a": "/app", "b": "/app", "c": "/app"},
    })
    assert resolve_app_id(tree, "/app/z", REGIONS) == "a"

def test_match_needs_trailing_slash(nav_tree):
    assert resolve_app_id(nav_tree, "/app/profile", REGIONS) is None
    assert resolve_app_id(nav_tree, "/app/profiles/x", REGIONS) is None

def test_match_ignores_case(nav_tree):
    assert resolve_app_id(nav_tree, "/APP/Profile/Edit", REGIONS) == "profile"

def test_prefix_is_literal():
    tree = NavTree.model_validate({"main": {"items": [{"id": "a.x"}]}, "paths": {"a": "/a.b"}})
    assert resolve_app_id(tree, "/aXb/c", REGIONS) is None
    assert resolve_app_id(tree, "/a.b/c", REGIONS) == "a"

def test_item_without_path_entry_is_skipped():
    tree = NavTree.model_validate({"main": {"items": [{"id": "ghost.view"}]}, "paths": {}})
    assert resolve_app_id(tree, "/ghost/view", REGIONS) is None

def test_missing_tree_resolves_to_none():
    assert resolve_app_id(None, "/app/profile/edit", REGIONS) is None

def test_items_in_excluded_region_never_match(nav_tree):
    assert resolve_app_id(nav_tree, "/legal/terms", REGIONS) is None

def test_region_models_are_kept():
    tree = NavTree(paths={"p": "/p"}, main=NavRegion(items=[NavItem(id="p.x")]))
    assert list(tree.regions) == ["main"]
    assert resolve_app_id(tree, "/p/x", REGIONS) == "p"
