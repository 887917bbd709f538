"""Exception hierarchy for the catalog transform."""


class CatalogError(Exception):
    """Base exception for every fatal condition of a catalog run."""


class ConfigError(CatalogError):
    """Raised when a configuration file or value is invalid."""


class CrosswalkError(CatalogError):
    """Raised when an existing crosswalk file cannot be parsed."""


class CatalogFileError(CatalogError):
    """Raised when the catalog input file cannot be read."""


class CatalogFormatError(CatalogError):
    """Raised when the catalog document does not decode."""


class OutputError(CatalogError):
    """Raised when the report or the record store cannot be written."""


class FieldError(CatalogError):
    """Base exception for a bad field on a catalog node.

    Attributes:
        path (str): Location of the node, e.g. ``series[0]/season[1]``.
        field (str): Name of the offending field.
    """

    def __init__(self, message: str, *, path: str, field: str) -> None:
        """Initialize the error with its node location.

        Args:
            message (str): Human readable description.
            path (str): Location of the node inside the document.
            field (str): Name of the offending field.
        """
        super().__init__(f"{path}: {message}")
        self.path = path
        self.field = field
        self.detail = message


class FieldFormatError(FieldError):
    """Raised when a numeric field is missing or not an integer."""


class MissingTitleError(FieldError):
    """Raised when a title variant is absent from a title list."""
