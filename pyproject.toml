[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stickynote"
version = "0.1.0"
description = "A small frameless, always-on-top sticky note window driven by keyboard shortcuts."
requires-python = ">=3.10"
dependencies = []
keywords = ["sticky", "note", "stickie", "desktop", "tkinter", "shortcuts"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stickynote = "stickynote.window:main"

[tool.hatch.build.targets.wheel]
packages = ["stickynote"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
