"""Theme preference service."""

from __future__ import annotations

import logging

from taskpad_cli.models import Theme
from taskpad_cli.repositories import ThemeRepository

logger = logging.getLogger(__name__)


class ThemeService:
    """Holds the light/dark preference and persists every change."""

    def __init__(self, theme_repository: ThemeRepository):
        self.repository = theme_repository
        self.theme: Theme = theme_repository.load()

    def toggle(self) -> Theme:
        self.theme = "dark" if self.theme == "light" else "light"
        self.repository.save(self.theme)
        logger.info("theme switched to %s", self.theme)
        return self.theme
