[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gitgud-ui"
version = "0.1.0"
description = "Toolkit-independent view models for a Git client: branches, file lists, commits, scrolling and recent repositories"
requires-python = ">=3.10"
dependencies = [
    "platformdirs",
]
keywords = ["git", "gui", "version-control", "view-model", "virtual-scroll"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gitgud_ui"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
