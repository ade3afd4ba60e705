[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokeduel"
version = "1.0.0"
description = "A turn-based console game of Pokémon duels against gym leaders and masters, driven by CSV data files."
requires-python = ">=3.10"
dependencies = []
keywords = ["pokemon", "game", "turn-based", "console", "csv", "combat"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pokeduel = "pokeduel.game:main"

[tool.hatch.build.targets.wheel]
packages = ["pokeduel"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
