"""Error types raised by the load, assemble, and build steps"""

from pathlib import Path


class PageError(Exception):
    """Base class for every error surfaced by the page pipeline."""


class NotFound(PageError):
    """The document path does not resolve to a file."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Document not found: {self.path}")


class ReadError(PageError):
    """The document exists but could not be read or decoded."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not read {self.path}: {reason}")


class MissingRequiredField(PageError):
    """A metadata field the assembler requires is absent."""

    def __init__(self, field: str, source: str = ""):
        self.field = field
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"Missing required metadata field '{field}'{where}")


class BuildError(PageError):
    """A single document failed during a batch build."""

    def __init__(self, path: Path, cause: Exception):
        self.path = Path(path)
        super().__init__(f"Failed to build {self.path}: {cause}")


class EmptySlug(PageError):
    """Neither the source file name nor the title yields a usable slug."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"Cannot derive a slug for {source}: file name and title are empty after slugifying")


class UnsafeOutputPath(PageError):
    """A page would be written outside the output directory."""

    def __init__(self, path: Path, output_dir: Path):
        self.path = Path(path)
        self.output_dir = Path(output_dir)
        super().__init__(f"Refusing to write {self.path} outside {self.output_dir}")
