[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "booktools"
version = "0.1.0"
description = "Markdown book helpers: gettext message extraction and translation, exercise file extraction, and small worked exercises"
requires-python = ">=3.10"
keywords = ["markdown", "gettext", "po", "i18n", "translation", "book", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Internationalization",
    "Topic :: Software Development :: Localization",
    "Topic :: Text Processing :: Markup :: Markdown",
]
dependencies = [
    "markdown-it-py",
    "requests",
    "beautifulsoup4",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mdbook-gettext = "booktools.gettext:main"
mdbook-xgettext = "booktools.xgettext:main"
mdbook-exerciser = "booktools.exerciser:main"
booktools-library = "booktools.library:main"
booktools-matrix = "booktools.matrix:main"
booktools-luhn = "booktools.luhn:main"
booktools-gui = "booktools.gui:main"
booktools-philosophers = "booktools.philosophers:main"
booktools-links = "booktools.links:main"
booktools-dirs = "booktools.dirs:main"

[tool.hatch.build.targets.wheel]
packages = ["booktools"]

[tool.hatch.build.targets.sdist]
include = ["booktools", "tests"]

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
warn_redundant_casts = true
