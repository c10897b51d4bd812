import io

import pytest
from rich.console import Console

from staffdemo.core import AppSettings, ScreenType
from staffdemo.viewmodels import StartScreenViewModel
from staffdemo.views import StartScreenView

PHRASES = {
    "TITLE_F1": "Staff Demo",
    "TITLE_1F": "Staff Demo Reloaded",
    "VIEW_StartScreen_navigateToNextButton": "Next",
    "VIEW_StartScreen_createNewRepositoryText": "New repository",
    "VIEW_GLOBAL_staffDirectoryText": "Staff file",
}


@pytest.fixture
def view_model(tmp_path):
    settings = AppSettings(tmp_path)
    settings.translate_manager.load_localizations({"en": PHRASES})
    return StartScreenViewModel(settings)


def _render(view):
    console = Console(file=io.StringIO(), width=120, color_system=None)
    console.print(view.render())
    return console.file.getvalue()


def test_labels_come_from_translations(view_model):
    view = StartScreenView(view_model)
    assert view.window_header_text == "Staff Demo"
    assert view.navigate_button_text == "Next"
    assert view.staff_directory_path == view_model.staff_directory


def test_update_translations_reloads_header(view_model):
    view = StartScreenView(view_model)
    view.update_translations()
    assert view.window_header_text == "Staff Demo Reloaded"


def test_missing_translation_is_marked(tmp_path):
    view = StartScreenView(StartScreenViewModel(AppSettings(tmp_path)))
    assert view.navigate_button_text == "[[VIEW_StartScreen_navigateToNextButton]]"


def test_button_label_is_padded(view_model):
    label = StartScreenView(view_model).button_label
    assert label.strip() == "Next"
    assert len(label) == len("Next") + 4


def test_render_shows_screen_contents(view_model):
    out = _render(StartScreenView(view_model))
    assert "Staff Demo" in out
    assert "Staff file" in out
    assert "Next" in out
    assert "[ ] New repository" in out


def test_toggle_checkbox(view_model):
    view = StartScreenView(view_model)
    assert view.handle_input("c") is True
    assert view_model.create_new_repository is True
    assert "[x] New repository" in _render(view)
    view.handle_input("c")
    assert view_model.create_new_repository is False


def test_enter_presses_button(view_model):
    view = StartScreenView(view_model)
    seen = []
    view_model.navigate_to_next_screen.connect(seen.append)
    assert view.handle_input("") is True
    assert seen == [ScreenType.LOAD_EMPLOYEE_SCREEN]


def test_unknown_input_is_ignored(view_model):
    view = StartScreenView(view_model)
    assert view.handle_input("zzz") is False
    assert view_model.create_new_repository is False


def test_status_message_is_shown(view_model):
    view = StartScreenView(view_model)
    view_model.set_status_message("file missing")
    assert view.status_message == "file missing"
    assert "file missing" in _render(view)