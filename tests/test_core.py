from pathlib import Path

import pytest

from staffdemo.core import AppSettings, Signal, ThemeManager, TranslateManager
from staffdemo.theme import Theme, ThemeColor


def test_signal_connect_emit_disconnect():
    received = []
    signal = Signal()
    slot = signal.connect(received.append)
    signal.emit(1)
    signal(2)
    signal.disconnect(slot)
    signal.emit(3)
    assert received == [1, 2]


def test_signal_disconnect_unknown_is_ignored():
    calls = []
    signal = Signal()
    signal.connect(lambda: calls.append("a"))
    signal.disconnect(print)
    signal.emit()
    assert calls == ["a"]


def test_theme_manager_default():
    manager = ThemeManager()
    assert manager.theme.name == "Default"
    assert manager.theme_names() == ["Default"]
    assert manager.themes() == [Theme()]


def test_theme_manager_add_and_set():
    manager = ThemeManager()
    changes = []
    manager.theme_changed.connect(lambda: changes.append(manager.theme.name))
    night = Theme(name="Night", text_base=ThemeColor.rgb(9, 9, 9))
    assert manager.add_theme(night) is True
    assert manager.add_theme(Theme(name="Night")) is False
    assert manager.theme_names() == ["Default", "Night"]
    manager.set_theme("Night")
    assert manager.theme.text_base == night.text_base
    assert changes == ["Night"]


def test_theme_manager_unknown_theme():
    manager = ThemeManager()
    with pytest.raises(KeyError):
        manager.set_theme("Missing")
    assert manager.theme.name == "Default"


def test_theme_manager_current_is_a_copy():
    manager = ThemeManager()
    manager.theme.text_base = ThemeColor.rgb(1, 1, 1)
    manager.set_theme("Default")
    assert manager.theme.text_base == Theme().text_base


def test_translate_missing_language():
    manager = TranslateManager("en")
    with pytest.raises(KeyError, match="Not find language en."):
        manager.load_localizations({"ru": {}})


def test_translate_lookup_and_placeholders():
    manager = TranslateManager("en")
    manager.load_localizations({"en": {"GREET": "Hi {name}, {name}! {other}"}})
    assert manager.translate("GREET", {"name": "Ann"}) == "Hi Ann, Ann! {other}"
    assert manager.translate("GREET") == "Hi {name}, {name}! {other}"
    assert manager.translate("NOPE") == "[[NOPE]]"


def test_translate_reload_replaces():
    manager = TranslateManager("en")
    manager.load_localizations({"en": {"A": "a", "B": "b"}})
    manager.load_localizations({"en": {"C": "c"}})
    assert manager.dictionary == {"C": "c"}
    assert manager.translate("A") == "[[A]]"


def test_translate_rejects_non_string():
    manager = TranslateManager("en")
    with pytest.raises(TypeError):
        manager.load_localizations({"en": {"N": 5}})


def test_app_settings_paths_and_defaults(tmp_path):
    settings = AppSettings(tmp_path)
    assert settings.localization_directory == tmp_path / "langs.json"
    assert settings.theme_directory == tmp_path / "themes.json"
    assert settings.staff_directory == tmp_path / "staff.csv"
    assert settings.log_directory == tmp_path / "log.txt"
    assert (settings.screen_width, settings.screen_height) == (120, 30)
    assert settings.current_language == "en"
    assert settings.translate_manager.language == settings.current_language
    assert settings.theme_manager.theme.name == "Default"


def test_app_settings_default_base_is_cwd():
    settings = AppSettings()
    assert settings.staff_directory == Path.cwd() / "staff.csv"


def test_app_settings_reset_size(tmp_path):
    settings = AppSettings(tmp_path)
    settings.screen_width = 80
    settings.screen_height = 10
    settings.set_base_width_height()
    assert (settings.screen_width, settings.screen_height) == (120, 30)