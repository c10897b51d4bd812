# staffdemo

Staff and project bookkeeping for a small company, with a terminal start
screen drawn by `rich`.

The package keeps employees and the projects they work on. It covers
cleaners, drivers, programmers, testers, team leaders, project managers and
senior managers. It works out their payments and reads and writes the staff
list as a semicolon-separated file. Its interface texts come from a JSON
language pack.

## Installing

```
pip install .
```

## Running

```
staffdemo [--dir DIRECTORY]
```

The program looks in `DIRECTORY`, or the current directory if `--dir` is not
given, for `langs.json`. This file holds language packs keyed by language
code. Each pack maps text keys to translated strings, and the `"en"` pack is
the one used. If the file is missing, is not valid JSON, or has no `"en"`
pack, the program prints the problem and exits with status 1.

It then draws the start screen. The screen shows the expected location of
`staff.csv` in that directory, a "create new repository" checkbox and a
continue button. Type a line and press Enter to act on the screen:

- `c` or `x` toggles the checkbox,
- an empty line or `n` presses the continue button,
- `q`, `quit` or `exit` leaves the program, as does end of input.

### What the interface does not do

The start screen is the only screen. Pressing continue asks for the employee
loading screen, but no such screen exists, so the start screen stays shown.
The interface never reads or writes `staff.csv` and never loads `themes.json`.
Use the library below for that.

## Using the library

### Staff files

The staff file starts with the header line `id;name;position;salary;project`.
Several projects in the last column are separated by commas.

```python
from staffdemo.storage import StaffStorageProvider
from staffdemo.repository import RepositoryInstruments

provider = StaffStorageProvider()
count = provider.load_from_file("staff.csv")   # records read; OSError if unreadable

instruments = RepositoryInstruments()
instruments.load_staff_from_queue(provider.employee_queue)

for employee in instruments.download_staffs():   # ordered by id
    print(employee.id, employee.name, employee.position)

provider.save_to_file("staff.csv", instruments.download_staffs())
```

`load_from_file` skips the header line. It also skips any line that does not
split into exactly five fields. A line whose project field is empty counts as
four fields and is skipped, and `save_to_file` writes cleaners and drivers
that way.

Positions recognised when loading are `cleaner`, `driver`, `programmer`,
`tester`, `teamleader`, `pmanager` and `smanager`. A salary that does not
start with an integer is read as 0.

### Repositories

`staffdemo.repository.StaffRepository` keeps staff by id. It has these
searches:

- `by_name`: the name contains the given text,
- `by_position`: the position matches exactly,
- `by_payment_above`: payment strictly above the given amount,
- `by_payment_below`: payment strictly below the given amount.

`ProjectRepository` keeps projects by name. Use `add_staff`, `remove_staff`
and `relocate_staff` to move engineers between projects.

### Staff and payments

The staff classes are in `staffdemo.employee` (`Cleaner`, `Driver`) and
`staffdemo.engineering` (`Programmer`, `Tester`, `TeamLeader`,
`ProjectManager`, `SeniorManager`, `Project`). Set `work_time`, call `calc()`,
then read `payment`.

Programmers, testers and team leaders need a project to calculate; without one,
`calc()` raises `ValueError`.

### Translations

```python
from staffdemo.core import TranslateManager

manager = TranslateManager("en")
manager.load_localizations({"en": {"HELLO": "Hello, {name}!"}})
manager.translate("HELLO", {"name": "Ann"})   # 'Hello, Ann!'
manager.translate("MISSING")                  # '[[MISSING]]'
```

### Themes

`staffdemo.theme.Theme` is a named set of colours. `staffdemo.core.ThemeManager`
keeps the known themes and the current one. `staffdemo.storage.ThemeStorageProvider`
reads and writes themes as a JSON object keyed by theme name.

## Tests

```
pip install .[test]
pytest
```