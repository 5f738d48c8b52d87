import pytest
from PIL import Image

from ViewCase.ui.base import Screen, red
from screens import LoginScreen, MainScreen, ViewlessScreen


@pytest.mark.smoke
def test_view_is_lazy():
    screen = Screen()
    assert not screen.is_view_loaded()

    view = screen.view

    assert isinstance(view, Image.Image)
    assert screen.is_view_loaded()
    assert screen.view is view


@pytest.mark.unit
def test_view_uses_screen_resolution():
    assert Screen().view.size == (128, 128)
    assert MainScreen().view.size == (320, 240)


@pytest.mark.unit
def test_view_did_load_called_once():
    loads = []

    class CountingScreen(Screen):
        def view_did_load(self):
            super().view_did_load()
            loads.append(self)

    screen = CountingScreen()
    screen.view
    screen.view
    assert len(loads) == 1


@pytest.mark.unit
def test_unload_releases_view():
    screen = LoginScreen()
    first = screen.view

    screen.view_did_unload()

    assert not screen.is_view_loaded()
    assert screen.draw is None
    # reloads on next access
    assert screen.view is not first


@pytest.mark.unit
def test_unload_before_load_is_safe():
    screen = Screen()
    screen.view_did_unload()
    screen.view_did_unload()
    assert not screen.is_view_loaded()


@pytest.mark.unit
def test_viewless_screen():
    screen = ViewlessScreen()
    assert screen.view is None
    assert not screen.is_view_loaded()
    # nothing to draw on, nothing drawn
    screen.screen_update()


@pytest.mark.unit
def test_active_inactive():
    screen = Screen()
    screen.active()
    assert screen.is_active
    screen.inactive()
    assert not screen.is_active


@pytest.mark.unit
def test_screen_update_draws_title_bar():
    screen = LoginScreen()
    screen.update()

    assert screen.is_view_loaded()
    assert screen.view.getpixel((0, 16)) == red(64)


@pytest.mark.unit
def test_clear_screen():
    screen = Screen()
    screen.screen_update()
    screen.clear_screen()
    assert screen.view.getpixel((0, 0)) == red(0)


@pytest.mark.unit
def test_red():
    assert red(64) == (64, 0, 0)
    assert red(-5) == (0, 0, 0)
    assert red(300) == (255, 0, 0)


@pytest.mark.unit
def test_login_screen_focus():
    screen = LoginScreen()
    assert screen.focus == 0
    screen.key_down()
    assert screen.focus == 1
    screen.key_down()
    assert screen.focus == 0


@pytest.mark.unit
def test_repr():
    screen = LoginScreen()
    assert repr(screen) == "<LoginScreen 'Login' loaded=False>"
