"""Reading and writing staff records, colour themes and translation packs."""

from __future__ import annotations

import json
from collections import deque
from collections.abc import Iterable
from dataclasses import fields
from pathlib import Path
from typing import Any

from staffdemo.employee import Employee, TempEmployee, TempProject
from staffdemo.theme import ColorType, Theme, ThemeColor
from staffdemo.utils import split_file_line

STAFF_HEADER = "id;name;position;salary;project"
_DELIM = ";"
_SUB_DELIM = ","

_COLOR_FIELDS = tuple(f.name for f in fields(Theme) if f.name != "name")


class StaffStorageProvider:
    """Reads staff records into queues of raw records and writes staff out."""

    def __init__(self) -> None:
        self.employee_queue: deque[TempEmployee] = deque()
        self.project_queue: deque[TempProject] = deque()

    def load_from_file(self, path: str | Path) -> int:
        """Queue every well-formed record of ``path``; return how many were read.

        The first line is a header and is skipped. Lines that do not hold
        exactly five fields are ignored. Raises ``OSError`` if the file
        cannot be opened.
        """
        loaded = 0
        with open(path, encoding="utf-8") as file:
            next(file, None)
            for raw in file:
                record = split_file_line(raw.rstrip("\r\n"), _DELIM)
                if len(record) != 5:
                    continue
                ident, name, position, salary, projects = record
                self.employee_queue.append(
                    TempEmployee(
                        id=ident,
                        name=name,
                        position=position,
                        salary=salary,
                        project=projects,
                    )
                )
                self.project_queue.extend(
                    TempProject(project) for project in split_file_line(projects, _SUB_DELIM)
                )
                loaded += 1
        return loaded

    def save_to_file(self, path: str | Path, staffs: Iterable[Employee | None]) -> None:
        """Write ``staffs`` to ``path`` under a header line, replacing the file."""
        with open(path, "w", encoding="utf-8", newline="\n") as file:
            file.write(STAFF_HEADER + "\n")
            for staff in staffs:
                if staff is None:
                    continue
                file.write(staff.make_line_for_file(_DELIM, _SUB_DELIM) + "\n")


def _color_to_json(color: ThemeColor) -> dict[str, Any]:
    data: dict[str, Any] = {"type": color.type.value}
    if color.type is ColorType.RGB:
        data.update(red=color.red, green=color.green, blue=color.blue)
    elif color.type in (ColorType.PALETTE16, ColorType.PALETTE256):
        data["palette"] = color.palette
    return data


def _color_from_json(data: dict[str, Any]) -> ThemeColor:
    kind = ColorType(data.get("type", ColorType.DEFAULT.value))
    if kind is ColorType.RGB:
        return ThemeColor.rgb(data["red"], data["green"], data["blue"])
    if kind is ColorType.PALETTE16:
        return ThemeColor.palette16(data["palette"])
    if kind is ColorType.PALETTE256:
        return ThemeColor.palette256(data["palette"])
    return ThemeColor()


class ThemeStorageProvider:
    """Loads and stores colour themes as a JSON object keyed by theme name."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else Path.cwd() / "themes.json"

    def read_themes(self) -> list[Theme]:
        """Return the stored themes; an absent file holds none.

        Raises ``ValueError`` if the file is not valid theme JSON.
        """
        if not self.path.exists():
            return []
        with self.path.open(encoding="utf-8") as file:
            try:
                data = json.load(file)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Fail parsing {self.path.name}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Fail parsing {self.path.name}: expected an object of themes")
        themes = []
        for name, entry in data.items():
            try:
                colours = {
                    key: _color_from_json(entry[key]) for key in _COLOR_FIELDS if key in entry
                }
            except (KeyError, TypeError, ValueError) as exc:
                raise ValueError(f"Invalid theme {name!r}: {exc}") from exc
            themes.append(Theme(name=name, **colours))
        return themes

    def save_themes(self, themes: Iterable[Theme]) -> None:
        """Write ``themes`` to the theme file, replacing it."""
        data = {
            theme.name: {key: _color_to_json(getattr(theme, key)) for key in _COLOR_FIELDS}
            for theme in themes
        }
        with self.path.open("w", encoding="utf-8") as file:
            json.dump(data, file, indent=2, ensure_ascii=False)


class TranslateStorageProvider:
    """Loads the translation packs of every language from a JSON file."""

    def __init__(self, path: str | Path) -> None:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f'Not valid lang file: "{path}"')
        self.path = path
        self.language_packs: dict[str, Any] = {}

    def load_from_json(self) -> dict[str, Any]:
        """Read the file and return the packs; ``ValueError`` on bad JSON."""
        with self.path.open(encoding="utf-8") as file:
            try:
                self.language_packs = json.load(file)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Parsing Error: {exc}") from exc
        return self.language_packs