[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "staffdemo"
version = "0.1.0"
description = "Staff and project bookkeeping with a terminal start screen"
requires-python = ">=3.10"
keywords = ["staff", "employees", "projects", "payroll", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]
dependencies = [
    "rich",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
staffdemo = "staffdemo.app:main"

[tool.hatch.build.targets.wheel]
packages = ["staffdemo"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
