[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numlex"
version = "0.1.0"
description = "Classify and count C numeric literals with finite-state machines, plus a small picture catalogue and text helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "finite-state machine", "c", "literals", "tokenizer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numlex-count = "numlex.counter:main"
numlex-pictures = "numlex.pictures:main"

[tool.hatch.build.targets.wheel]
packages = ["numlex"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
