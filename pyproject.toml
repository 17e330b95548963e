[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spojkit"
version = "0.1.0"
description = "Solutions and input generators for a collection of classic online-judge problems"
requires-python = ">=3.10"
dependencies = []
keywords = ["spoj", "competitive-programming", "algorithms", "puzzles", "online-judge"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spojkit-acpc10e = "spojkit.acpc10e:main"
spojkit-alphacode = "spojkit.alphacode:main"
spojkit-beads = "spojkit.beads:main"
spojkit-binstirl = "spojkit.binstirl:main"
spojkit-bureaucracy = "spojkit.bureaucracy:main"
spojkit-divsum = "spojkit.divsum:main"
spojkit-factorial = "spojkit.factorial:main"
spojkit-spelling = "spojkit.spelling:main"
spojkit-labyrinth = "spojkit.labyrinth:main"
spojkit-squares = "spojkit.squares:main"
spojkit-stamps = "spojkit.stamps:main"
spojkit-surprise = "spojkit.surprise:main"
spojkit-trip = "spojkit.trip:main"
spojkit-generate = "spojkit.generators:main"

[tool.hatch.build.targets.wheel]
packages = ["spojkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
