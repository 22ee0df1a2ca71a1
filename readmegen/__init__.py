"""Generate README.md content from the crate-level doc comments of a Cargo project."""

__version__ = "3.2.0"