"""Centralized exceptions for moss.

Every exception builds its own human-readable message so callers (the CLI or
any shell embedding the generator) can display ``str(exc)`` directly.
"""


class MossError(Exception):
    """Base exception for all moss errors."""


class InputError(MossError):
    """Raised when the source folder cannot be used at all."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class SourceNotFoundError(InputError):
    """Raised when the source folder does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Folder does not exist: {path}")


class SourceNotADirectoryError(InputError):
    """Raised when the source path exists but is not a folder."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Path is not a directory: {path}")


class NoContentError(MossError):
    """Raised when a scan finds no files to build a site from."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No files found in the specified folder: {path}. Choose a folder with some content.")


class OutputWriteError(MossError):
    """Raised when the output tree cannot be created or a required file cannot be written."""

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Failed to write '{target}': {reason}")


class DocumentParsingError(MossError):
    """Raised when a single document cannot be turned into a page."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse document at '{path}': {reason}")


class FrontmatterParsingError(DocumentParsingError):
    """Raised when YAML frontmatter is invalid."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(path, f"Invalid YAML frontmatter: {reason}")
