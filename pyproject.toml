[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortkit"
version = "0.1.0"
description = "In-place sorting algorithms and small sequence helpers with custom comparators"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sorting",
    "algorithms",
    "quicksort",
    "mergesort",
    "heapsort",
    "insertion-sort",
    "bubble-sort",
    "selection-sort",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
sortkit-demo = "sortkit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["sortkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
