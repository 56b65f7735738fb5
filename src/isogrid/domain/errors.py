"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           Settings related errors
# ============================================================================


class SettingError(DomainError):
    """Base class for errors related to grid settings."""

    def __init__(self, key: str, message: str | None = None) -> None:
        if message is None:
            message = f"Grid setting '{key}' error"
        super().__init__(message)
        self.key = key


class UnknownSettingError(SettingError, LookupError):
    """Raised when reading or writing a grid setting that does not exist."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"Grid setting '{key}' does not exist.")


class InvalidSettingError(SettingError, ValueError):
    """Raised when a grid setting value violates a configuration invariant."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        super().__init__(
            key, f"Invalid value {value!r} for grid setting '{key}': {reason}"
        )
        self.value = value
        self.reason = reason


# ============================================================================
#                           Length / expression errors
# ============================================================================


class InvalidLengthError(DomainError, ValueError):
    """Raised when text cannot be parsed as a CSS length."""

    def __init__(self, text: str) -> None:
        super().__init__(
            f"Cannot parse {text!r} as a length (expected e.g. '2%' or '1rem')."
        )
        self.text = text


class IncompatibleUnitsError(DomainError):
    """Raised when an expression mixes units that cannot be resolved at build time."""

    def __init__(self, left: str, right: str) -> None:
        super().__init__(
            f"Cannot combine '{left}' and '{right}' outside of a calc() expression."
        )
        self.left = left
        self.right = right


# ============================================================================
#                           Layout errors
# ============================================================================


class InvalidLayoutError(DomainError, ValueError):
    """Raised when a row layout cannot be distributed at all."""

    def __init__(self, cells_per_row: float) -> None:
        super().__init__(f"Cells per row must be positive, got {cells_per_row}.")
        self.cells_per_row = cells_per_row
