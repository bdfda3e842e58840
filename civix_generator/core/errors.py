"""Error types raised while generating extension artifacts."""

from pathlib import Path

from civix_generator.helpers.helpers_logging import print_error


class GenerationError(Exception):
    """Base error for anything that stops a generate command."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def print_error(self) -> None:
        """Print the error message using the logging helper."""
        print_error(self.message)


class WrongProjectTypeError(GenerationError):
    """The extension is not of the kind the command supports."""

    def __init__(self, actual: object, required: str) -> None:
        super().__init__(f"Wrong extension type: {actual}")
        self.actual = actual
        self.required = required


class InvalidIdentifierError(GenerationError):
    """A class name failed lexical or suffix validation."""


class UnknownTemplateError(GenerationError):
    """A template keyword outside the supported set."""

    def __init__(self, keyword: str, allowed: list[str]) -> None:
        super().__init__(
            f"Invalid test template: '{keyword}' "
            + f"(expected one of: {', '.join(allowed)})"
        )
        self.keyword = keyword


class RenderError(GenerationError):
    """The renderer has no template with the requested id."""


class FilesystemError(GenerationError):
    """An OS-level failure while creating a directory or writing a file."""

    def __init__(self, path: Path, error: OSError) -> None:
        reason = error.strerror or str(error)
        super().__init__(f"Cannot write {path}: {reason}")
        self.path = path
        self.error = error


class ManifestError(GenerationError):
    """info.xml is missing or cannot be parsed."""


class SettingsError(GenerationError):
    """civix.yaml is malformed."""
