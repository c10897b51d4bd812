"""Screens of the terminal interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from rich.align import Align
from rich.color import Color
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from staffdemo.viewmodels import StartScreenViewModel

_TOGGLE_KEYS = {"c", "x", " "}
_PRESS_KEYS = {"", "n", "next"}
_HEADER_WIDTH = 34
_CONTROL_WIDTH = 30


class BasicView(ABC):
    """A screen: something that renders and reacts to typed input."""

    @abstractmethod
    def render(self) -> RenderableType:
        """Return what the screen looks like now."""

    def handle_input(self, text: str) -> bool:
        """React to one line of input; True if it was used."""
        return False


class StartScreenView(BasicView):
    """The start screen: shows the staff file and offers to continue."""

    def __init__(self, view_model: StartScreenViewModel) -> None:
        self.view_model = view_model
        self.window_header_text = view_model.translate("TITLE_F1")
        self.navigate_button_text = view_model.translate("VIEW_StartScreen_navigateToNextButton")
        self.create_new_repository_text = view_model.translate(
            "VIEW_StartScreen_createNewRepositoryText"
        )
        self.staff_directory_text = view_model.translate("VIEW_GLOBAL_staffDirectoryText")
        self.staff_directory_path = view_model.staff_directory
        self.status_message = view_model.status_message
        view_model.status_message_changed.connect(self._update_status_message)

    def _update_status_message(self, message: str) -> None:
        self.status_message = message

    def update_translations(self) -> None:
        """Reload every label in the current language."""
        self.window_header_text = self.view_model.translate("TITLE_1F")
        self.navigate_button_text = self.view_model.translate(
            "VIEW_StartScreen_navigateToNextButton"
        )
        self.create_new_repository_text = self.view_model.translate(
            "VIEW_StartScreen_createNewRepositoryText"
        )
        self.staff_directory_text = self.view_model.translate("VIEW_GLOBAL_staffDirectoryText")

    @property
    def button_label(self) -> str:
        """The continue button's text, padded by two spaces on each side."""
        text = self.navigate_button_text
        return f"{text:^{len(text) + 4}}"

    @property
    def checkbox_label(self) -> str:
        mark = "[x]" if self.view_model.create_new_repository else "[ ]"
        return f"{mark} {self.create_new_repository_text}"

    def render(self) -> RenderableType:
        theme = self.view_model.theme()
        bg = theme.bg_primary.to_rich()

        header = Panel(
            Align.center(
                Text(f"{self.window_header_text:^{_HEADER_WIDTH}}", style="bold"),
                vertical="middle",
            ),
            height=5,
            style=Style(color=theme.text_window_header.to_rich(), bgcolor=bg),
            border_style=Style(color=theme.border_window_header.to_rich()),
        )

        staff_path = Panel(
            Group(
                Text(""),
                Text(self.staff_directory_text, justify="center"),
                Text(f"   {self.staff_directory_path}   ", justify="center"),
                Text(""),
            ),
            expand=False,
            border_style=Style(color=Color.from_ansi(7)),
        )

        checkbox = Align.right(
            Text(
                f"{self.checkbox_label:<{_CONTROL_WIDTH}}",
                style=Style(color=theme.text_base.to_rich(), bgcolor=bg),
            )
        )
        button = Align.right(
            Text(
                f"{'[' + self.button_label + ']':<{_CONTROL_WIDTH}}",
                style=Style(color=theme.text_success.to_rich()),
            )
        )

        body_parts: list[RenderableType] = [Text("\n" * 5), Align.center(staff_path)]
        if self.status_message:
            body_parts.append(
                Text(self.status_message, justify="center", style=Style(color=theme.text_info.to_rich()))
            )
        body_parts += [Text("\n" * 5), checkbox, Text(""), button]

        body = Panel(Group(*body_parts), border_style=Style(color=theme.border_primary.to_rich()))
        return Group(header, body)

    def handle_input(self, text: str) -> bool:
        """``c``/``x`` toggles the checkbox; Enter or ``n`` presses the button."""
        command = text.strip().lower() if text.strip() else text.strip()
        if text == " " or command in _TOGGLE_KEYS - {" "}:
            self.view_model.create_new_repository = not self.view_model.create_new_repository
            return True
        if command in _PRESS_KEYS:
            self.view_model.use_default_settings()
            return True
        return False