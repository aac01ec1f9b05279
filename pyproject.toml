[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aryzona"
version = "0.1.0"
description = "Chat bot building blocks: i18n, dice notation, music queues, radios and web content providers"
requires-python = ">=3.10"
keywords = ["chat", "bot", "i18n", "dice", "queue", "radio", "livescore", "xkcd", "spotify", "rss"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Communications :: Chat",
]
dependencies = [
    "requests",
    "defusedxml",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["aryzona"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
