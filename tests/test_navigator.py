import pytest

from core.navigator import Navigator, Screen, uses_storefront_layout


def test_starts_on_home():
    assert Navigator().current == Screen.HOME


def test_navigate_accepts_names_case_insensitively():
    nav = Navigator()
    assert nav.navigate("menu") == Screen.MENU
    assert nav.current == Screen.MENU


def test_unknown_screen_raises():
    with pytest.raises(ValueError):
        Navigator().navigate("KITCHEN")


def test_admin_dashboard_requires_session():
    authenticated = {"value": False}
    nav = Navigator(is_admin_authenticated=lambda: authenticated["value"])
    assert nav.navigate(Screen.ADMIN_DASHBOARD) == Screen.ADMIN_LOGIN
    authenticated["value"] = True
    assert nav.rendered_screen == Screen.ADMIN_DASHBOARD


def test_listeners_and_unsubscribe():
    nav = Navigator()
    seen = []
    unsubscribe = nav.subscribe(seen.append)
    nav.navigate(Screen.CART)
    unsubscribe()
    nav.navigate(Screen.HOME)
    assert seen == [Screen.CART]


def test_every_navigation_requests_scroll_to_top():
    nav = Navigator()
    nav.navigate(Screen.ABOUT)
    assert nav.consume_scroll_request() is True
    assert nav.consume_scroll_request() is False


def test_admin_screens_skip_storefront_layout():
    assert uses_storefront_layout(Screen.MENU)
    assert not uses_storefront_layout(Screen.ADMIN_LOGIN)
    assert not uses_storefront_layout(Screen.ADMIN_DASHBOARD)
