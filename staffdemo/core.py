"""Application core: signals, screens, themes, translations and settings."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import replace
from enum import Enum, auto
from pathlib import Path
from typing import Any

from staffdemo.theme import Theme


class Signal:
    """A list of callbacks invoked together."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> Callable[..., Any]:
        """Register ``slot`` and return it."""
        self._slots.append(slot)
        return slot

    def disconnect(self, slot: Callable[..., Any]) -> None:
        """Unregister ``slot``; unknown slots are ignored."""
        if slot in self._slots:
            self._slots.remove(slot)

    def emit(self, *args: Any) -> None:
        """Call every connected slot with ``args``, in connection order."""
        for slot in list(self._slots):
            slot(*args)

    __call__ = emit


class ScreenType(Enum):
    """Screens of the interface."""

    NULL_SCREEN = auto()
    START_SCREEN = auto()
    LOAD_EMPLOYEE_SCREEN = auto()
    BASE_SCREEN = auto()
    SETTINGS_SCREEN = auto()
    EDIT_EMPLOYEES_SCREEN = auto()


class ThemeManager:
    """Known colour themes and the one currently in use."""

    def __init__(self) -> None:
        self._themes: dict[str, Theme] = {"Default": Theme()}
        self.theme_changed = Signal()
        self._current = replace(self._themes["Default"])

    @property
    def theme(self) -> Theme:
        """The theme in use."""
        return self._current

    def set_theme(self, name: str) -> None:
        """Switch to the theme called ``name``; ``KeyError`` if unknown."""
        if name not in self._themes:
            raise KeyError(name)
        self._current = replace(self._themes[name])
        self.theme_changed.emit()

    def theme_names(self) -> list[str]:
        return sorted(self._themes)

    def themes(self) -> list[Theme]:
        return [self._themes[name] for name in sorted(self._themes)]

    def add_theme(self, theme: Theme) -> bool:
        """Register ``theme``; False if a theme of that name exists."""
        if theme.name in self._themes:
            return False
        self._themes[theme.name] = theme
        return True


class TranslateManager:
    """Phrases of one language, looked up by key."""

    def __init__(self, language: str) -> None:
        self.language = language
        self._translations: dict[str, str] = {}

    @property
    def dictionary(self) -> dict[str, str]:
        """All loaded phrases, ordered by key."""
        return dict(sorted(self._translations.items()))

    def load_localizations(self, translations: Mapping[str, Mapping[str, Any]]) -> None:
        """Load this manager's language from ``translations``, replacing earlier phrases."""
        if self.language not in translations:
            raise KeyError(f"Not find language {self.language}.")
        loaded: dict[str, str] = {}
        for key, value in translations[self.language].items():
            if not isinstance(value, str):
                raise TypeError(f"translation of {key!r} must be a string")
            loaded[key] = value
        self._translations = loaded

    def translate(self, key: str, placeholders: Mapping[str, str] | None = None) -> str:
        """Return the phrase for ``key`` with ``{name}`` placeholders filled in.

        An unknown key comes back as ``[[key]]``.
        """
        text = self._translations.get(key)
        if text is None:
            return f"[[{key}]]"
        for name, value in (placeholders or {}).items():
            text = text.replace("{" + name + "}", value)
        return text


class AppSettings:
    """File locations, screen size, language and the theme and translation managers."""

    BASE_WIDTH = 120
    BASE_HEIGHT = 30

    def __init__(self, base_dir: str | Path | None = None) -> None:
        base = Path(base_dir) if base_dir is not None else Path.cwd()
        self.localization_directory = base / "langs.json"
        self.theme_directory = base / "themes.json"
        self.staff_directory = base / "staff.csv"
        self.log_directory = base / "log.txt"
        self.screen_width = self.BASE_WIDTH
        self.screen_height = self.BASE_HEIGHT
        self.current_language = "en"
        self.theme_manager = ThemeManager()
        self.translate_manager = TranslateManager(self.current_language)

    def set_base_width_height(self) -> None:
        """Restore the default screen size."""
        self.screen_width = self.BASE_WIDTH
        self.screen_height = self.BASE_HEIGHT