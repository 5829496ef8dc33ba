[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tacotrader"
version = "0.1.0"
description = "Donnie's Tacos: an arcade stock-market game of tariffs, tacos and traders"
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "stocks", "tacos"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tacotrader = "tacotrader.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tacotrader"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
