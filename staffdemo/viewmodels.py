"""View models that sit between the screens and the application settings."""

from __future__ import annotations

from collections.abc import Mapping

from staffdemo.core import AppSettings, ScreenType, Signal
from staffdemo.theme import Theme


class BasicViewModel:
    """Gives views access to the current theme and translations."""

    def __init__(self, settings: AppSettings) -> None:
        self.settings = settings
        self.view_update_request = Signal()

    def theme(self) -> Theme:
        """The theme currently in use."""
        return self.settings.theme_manager.theme

    def translate(self, key: str, placeholders: Mapping[str, str] | None = None) -> str:
        """The phrase for ``key`` in the current language."""
        return self.settings.translate_manager.translate(key, placeholders)


class StartScreenViewModel(BasicViewModel):
    """State of the start screen: staff file location and repository choice."""

    def __init__(self, settings: AppSettings) -> None:
        super().__init__(settings)
        self.status_message = ""
        self.staff_directory = str(settings.staff_directory)
        self.create_new_repository = False
        self.navigate_to_next_screen = Signal()
        self.status_message_changed = Signal()

    def set_status_message(self, message: str) -> None:
        """Replace the status message and announce the change."""
        self.status_message = message
        self.status_message_changed.emit(message)

    def use_default_settings(self) -> None:
        """Ask to move on to the employee loading screen."""
        self.navigate_to_next_screen.emit(ScreenType.LOAD_EMPLOYEE_SCREEN)