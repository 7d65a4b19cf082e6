[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chatroulette"
version = "0.1.0"
description = "Date, weekday, time zone and country helpers for scheduling recurring chat-roulette rounds"
requires-python = ">=3.10"
keywords = ["scheduling", "weekday", "timezone", "country", "calendar"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chatroulette"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
