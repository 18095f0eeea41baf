[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "faststatus"
version = "0.1.0"
description = "A threaded status line generator for dwm-style window managers"
requires-python = ">=3.10"
dependencies = []
keywords = ["dwm", "status", "statusbar", "x11", "window-manager"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers :: Applets",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
faststatus = "faststatus.status:main"

[tool.hatch.build.targets.wheel]
packages = ["faststatus"]

[tool.pytest.ini_options]
addopts = "-ra"
