[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termite"
version = "0.1.0"
description = "Core of a terminal e-mail client: productivity metrics, notifications, command-bar commands and themes"
requires-python = ">=3.11"
dependencies = []
keywords = ["email", "terminal", "inbox-zero", "metrics", "notifications", "themes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Email :: Email Clients (MUA)",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["termite"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
