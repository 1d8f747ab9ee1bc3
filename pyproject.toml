[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emojipick"
version = "0.1.0"
description = "A small desktop emoji picker that copies and pastes the chosen emoji"
requires-python = ">=3.10"
dependencies = []
keywords = ["emoji", "picker", "desktop", "clipboard", "xdotool", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
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
emojipick = "emojipick.app:main"

[tool.hatch.build.targets.wheel]
packages = ["emojipick"]

[tool.pytest.ini_options]
addopts = "-ra"
