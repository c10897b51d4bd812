import json

import pytest

from staffdemo.employee import Cleaner
from staffdemo.engineering import Programmer, Project, SeniorManager
from staffdemo.storage import (
    STAFF_HEADER,
    StaffStorageProvider,
    ThemeStorageProvider,
    TranslateStorageProvider,
)
from staffdemo.theme import Theme, ThemeColor


def test_load_reads_records_and_projects(tmp_path):
    path = tmp_path / "staff.csv"
    path.write_text(
        STAFF_HEADER + "\n"
        "p1;Ann;programmer;10;Alpha\n"
        "s1;Bob;smanager;;Alpha,Beta\n",
        encoding="utf-8",
    )
    provider = StaffStorageProvider()
    assert provider.load_from_file(path) == 2
    ids = [temp.id for temp in provider.employee_queue]
    assert ids == ["p1", "s1"]
    first = provider.employee_queue[0]
    assert (first.name, first.position, first.salary, first.project) == (
        "Ann",
        "programmer",
        "10",
        "Alpha",
    )
    assert [p.name for p in provider.project_queue] == ["Alpha", "Alpha", "Beta"]


def test_load_skips_header_and_malformed_lines(tmp_path):
    path = tmp_path / "staff.csv"
    path.write_text(
        "p9;Header;programmer;1;Gamma\n"
        "too;few\n"
        "c1;Cid;cleaner;5;\n"
        "p2;Dan;tester;7;Delta\n",
        encoding="utf-8",
    )
    provider = StaffStorageProvider()
    assert provider.load_from_file(path) == 1
    assert [temp.id for temp in provider.employee_queue] == ["p2"]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        StaffStorageProvider().load_from_file(tmp_path / "absent.csv")


def test_save_writes_header_and_skips_none(tmp_path):
    path = tmp_path / "out.csv"
    cleaner = Cleaner("c1", "Cid", "cleaner", 5)
    StaffStorageProvider().save_to_file(path, [None, cleaner])
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == STAFF_HEADER
    assert lines[1:] == [cleaner.make_line_for_file(";", ",")]


def test_save_then_load_round_trip(tmp_path):
    path = tmp_path / "staff.csv"
    alpha, beta = Project("Alpha"), Project("Beta")
    programmer = Programmer("p1", "Ann", "programmer", 0, 0, 10, None)
    alpha.add_member(programmer)
    manager = SeniorManager("s1", "Bob", "smanager", 0, 0, 0, [])
    alpha.add_member(manager)
    beta.add_member(manager)
    StaffStorageProvider().save_to_file(path, [programmer, manager])

    provider = StaffStorageProvider()
    assert provider.load_from_file(path) == 2
    loaded = list(provider.employee_queue)
    assert [(t.id, t.name, t.position) for t in loaded] == [
        ("p1", "Ann", "programmer"),
        ("s1", "Bob", "smanager"),
    ]
    assert loaded[0].salary == "10"
    assert loaded[1].project == "Alpha,Beta"


def test_themes_absent_file_gives_empty(tmp_path):
    assert ThemeStorageProvider(tmp_path / "themes.json").read_themes() == []


def test_themes_round_trip(tmp_path):
    provider = ThemeStorageProvider(tmp_path / "themes.json")
    custom = Theme(
        name="Night",
        text_base=ThemeColor.rgb(1, 2, 3),
        bg_base=ThemeColor.palette256(200),
        border_window=ThemeColor(),
    )
    provider.save_themes([Theme(), custom])
    themes = provider.read_themes()
    assert [t.name for t in themes] == ["Default", "Night"]
    night = themes[1]
    assert night.text_base == custom.text_base
    assert night.bg_base == custom.bg_base
    assert night.border_window == ThemeColor()
    assert themes[0].text_accent == Theme().text_accent


def test_themes_bad_json_raises(tmp_path):
    path = tmp_path / "themes.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        ThemeStorageProvider(path).read_themes()


def test_themes_bad_colour_raises(tmp_path):
    path = tmp_path / "themes.json"
    path.write_text(json.dumps({"X": {"text_base": {"type": "rgb", "red": 1}}}), encoding="utf-8")
    with pytest.raises(ValueError):
        ThemeStorageProvider(path).read_themes()


def test_translate_provider_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        TranslateStorageProvider(tmp_path / "langs.json")


def test_translate_provider_loads(tmp_path):
    path = tmp_path / "langs.json"
    packs = {"en": {"HELLO": "Hello"}, "ru": {"HELLO": "Privet"}}
    path.write_text(json.dumps(packs), encoding="utf-8")
    provider = TranslateStorageProvider(path)
    assert provider.language_packs == {}
    assert provider.load_from_json() == packs
    assert provider.language_packs == packs


def test_translate_provider_bad_json(tmp_path):
    path = tmp_path / "langs.json"
    path.write_text("[1, 2", encoding="utf-8")
    provider = TranslateStorageProvider(path)
    with pytest.raises(ValueError, match="Parsing Error"):
        provider.load_from_json()