import dataclasses

import pytest

from ltbkit.window_settings import WindowSettings


def test_defaults():
    settings = WindowSettings()
    assert settings.title == "Window"
    assert settings.transparent_background is False
    assert settings.resizable is True
    assert settings.title_bar is True
    assert settings.initial_size is None
    assert settings.initial_position is None


def test_size_becomes_tuple():
    settings = WindowSettings(title="Hello", resizable=False, initial_size=[1280, 720])
    assert settings.initial_size == (1280, 720)
    assert settings.title == "Hello"
    assert settings.resizable is False


def test_position_may_be_negative():
    settings = WindowSettings(initial_position=(-10, 5))
    assert settings.initial_position == (-10, 5)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        WindowSettings(initial_size=(-1, 10))


@pytest.mark.parametrize("bad", [(1,), (1, 2, 3), ()])
def test_wrong_component_count_rejected(bad):
    with pytest.raises(ValueError):
        WindowSettings(initial_size=bad)


def test_non_integer_component_rejected():
    with pytest.raises(TypeError):
        WindowSettings(initial_position=(1.5, 2))


def test_settings_are_frozen():
    settings = WindowSettings()
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.title = "Other"
    assert settings.title == "Window"


def test_replace_validates():
    settings = WindowSettings(initial_size=(100, 100))
    with pytest.raises(ValueError):
        dataclasses.replace(settings, initial_size=(100, -5))
    assert dataclasses.replace(settings, title="New").initial_size == (100, 100)