[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glyphtext"
version = "0.1.0"
description = "Compose text from font glyphs and wrap it to a width"
requires-python = ">=3.10"
dependencies = []
keywords = ["text", "glyph", "font", "word-wrap"]
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
    "Topic :: Text Processing :: Fonts",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["glyphtext"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
