"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for callers that only catch ValueError.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class PersistenceError(DomainError):
    """A record store failed to read or write the record collection."""


class AuthError(DomainError):
    """No authenticated session is available for the requested operation."""


def invalid_purchase_fields() -> str:
    """Return message for a submission missing a name, price or quantity."""
    return "Please fill out Item Name, Price, and Quantity with positive numbers."


def invalid_target(target: object) -> str:
    """Return message for a negative rock bottom target."""
    return f"Rock bottom price must not be negative (got {target})"


def unknown_unit(unit: object) -> str:
    """Return message for a unit outside the supported set."""
    return f"Unknown unit '{unit}'. Choose one of: oz, lb, ea, g, ml"


def not_authenticated() -> str:
    """Return message when a write is attempted without a session."""
    return "Authentication required to log data."


def store_failure(operation: str, error: Exception) -> str:
    """Return message for a failed store operation."""
    return f"Could not {operation} purchase records: {error}"
