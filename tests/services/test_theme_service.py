"""Unit tests for ThemeService."""

from taskpad_cli.repositories import THEME_KEY, ThemeRepository
from taskpad_cli.services.theme_service import ThemeService


def test_defaults_to_light(storage):
    assert ThemeService(ThemeRepository(storage)).theme == "light"


def test_toggle_persists(storage):
    service = ThemeService(ThemeRepository(storage))
    assert service.toggle() == "dark"
    assert storage.get_item(THEME_KEY) == "dark"
    assert ThemeService(ThemeRepository(storage)).theme == "dark"


def test_toggle_twice_restores(storage):
    service = ThemeService(ThemeRepository(storage))
    service.toggle()
    assert service.toggle() == "light"
    assert storage.get_item(THEME_KEY) == "light"
