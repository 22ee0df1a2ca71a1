[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "readmegen"
version = "3.2.0"
description = "Generate README.md content from the crate-level doc comments of a Cargo project"
requires-python = ">=3.11"
dependencies = []
keywords = ["readme", "documentation", "cargo", "markdown", "doc-comments"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Documentation",
    "Topic :: Text Processing :: Markup :: Markdown",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
readmegen = "readmegen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["readmegen"]

[tool.pytest.ini_options]
addopts = "-ra"
