[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hwkit"
version = "0.1.0"
description = "Small command-line utilities: ZipJpeg listing, code-page conversion, word counting, a JSON tree library and a weather report"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "zip",
    "jpeg",
    "codepage",
    "utf-8",
    "wordcount",
    "hash-map",
    "pearson-hash",
    "json",
    "weather",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hwkit-zipjpeg = "hwkit.zipjpeg:main"
hwkit-cp2utf8 = "hwkit.codepages:main"
hwkit-hello = "hwkit.hello:main"
hwkit-stack = "hwkit.stack:main"
hwkit-wordcount = "hwkit.wordcount:main"
hwkit-weather = "hwkit.weather:main"

[tool.hatch.build.targets.wheel]
packages = ["hwkit"]

[tool.hatch.build.targets.sdist]
include = ["hwkit", "tests", "pyproject.toml"]

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
