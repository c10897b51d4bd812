"""Screen switching, the interactive loop and the command entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator

from rich.console import Console, RenderableType

from staffdemo.core import AppSettings, ScreenType
from staffdemo.storage import TranslateStorageProvider
from staffdemo.viewmodels import StartScreenViewModel
from staffdemo.views import BasicView, StartScreenView

_QUIT_COMMANDS = {"q", "quit", "exit"}


class ScreenManager:
    """Holds the screens and knows which one is shown."""

    def __init__(self) -> None:
        self._screens: dict[ScreenType, BasicView] = {}
        self.active_screen_type = ScreenType.NULL_SCREEN

    def add_screen(self, screen_type: ScreenType, screen: BasicView) -> None:
        """Register ``screen``; a type already registered keeps its screen."""
        self._screens.setdefault(screen_type, screen)

    def show_screen(self, screen_type: ScreenType) -> None:
        """Make ``screen_type`` active; unknown types are ignored."""
        if screen_type in self._screens:
            self.active_screen_type = screen_type

    def active_screen(self) -> BasicView | None:
        """The shown screen, or None if nothing is shown yet."""
        if self.active_screen_type is ScreenType.NULL_SCREEN:
            return None
        return self._screens[self.active_screen_type]

    def active_screen_name(self) -> str:
        if self.active_screen_type is ScreenType.NULL_SCREEN:
            return "No active screen"
        return self.active_screen_type.name

    def render(self) -> RenderableType:
        """Render the shown screen; ``LookupError`` if there is none."""
        screen = self.active_screen()
        if screen is None:
            raise LookupError("No active screen")
        return screen.render()

    def handle_input(self, text: str) -> bool:
        """Pass input to the shown screen; False if none or unused."""
        screen = self.active_screen()
        return screen.handle_input(text) if screen is not None else False


class UserInterface:
    """The application: loads translations, builds the screens and runs them."""

    def __init__(self, settings: AppSettings | None = None, console: Console | None = None) -> None:
        self.settings = settings if settings is not None else AppSettings()
        self.console = console if console is not None else Console()
        self.screen_manager = ScreenManager()
        self._load_translations()
        self._init_screens()
        self.settings.theme_manager.theme_changed.connect(self._draw)

    def _load_translations(self) -> None:
        provider = TranslateStorageProvider(self.settings.localization_directory)
        self.settings.translate_manager.load_localizations(provider.load_from_json())

    def _init_screens(self) -> None:
        self.start_screen_view_model = StartScreenViewModel(self.settings)
        self.start_screen_view_model.navigate_to_next_screen.connect(self.screen_manager.show_screen)
        self.screen_manager.add_screen(
            ScreenType.START_SCREEN, StartScreenView(self.start_screen_view_model)
        )
        self.screen_manager.show_screen(ScreenType.START_SCREEN)

    def _draw(self) -> None:
        self.console.clear()
        self.console.print(self.screen_manager.render())

    def _prompt_lines(self) -> Iterator[str]:
        while True:
            try:
                yield self.console.input("> ")
            except (EOFError, KeyboardInterrupt):
                return

    def run(self, inputs: Iterable[str] | None = None) -> None:
        """Draw the active screen and feed it input until quit or end of input."""
        lines = iter(inputs) if inputs is not None else self._prompt_lines()
        self._draw()
        for line in lines:
            if line.strip().lower() in _QUIT_COMMANDS:
                break
            self.screen_manager.handle_input(line)
            self._draw()


def main(argv: list[str] | None = None) -> int:
    """Start the interface; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="staffdemo", description="Staff management demo.")
    parser.add_argument(
        "--dir",
        default=None,
        help="directory holding langs.json, themes.json and staff.csv (default: current)",
    )
    args = parser.parse_args(argv)
    try:
        ui = UserInterface(AppSettings(args.dir))
    except (OSError, ValueError, KeyError, TypeError) as exc:
        print(exc, file=sys.stderr)
        return 1
    ui.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())