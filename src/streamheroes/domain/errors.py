"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist for the acting user."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class AuthRequired(DomainError):
    """No actor is resolved for an operation that needs one."""


class EmptyRoster(ValidationError):
    """A game session was requested without any participants."""


class NoGamesRemaining(DomainError):
    """A donator has no remaining games to play."""

    def __init__(self, donator_id: int, donator_name: Optional[str] = None):
        self.donator_id = donator_id
        self.donator_name = donator_name
        label = donator_name if donator_name is not None else f"#{donator_id}"
        super().__init__(f"Donator {label} has no remaining games")


class BackendError(DomainError):
    """Opaque wrapper around a storage or transport failure."""


def auth_required(action: str) -> str:
    """Return message for an operation attempted without an actor."""
    return f"User must be logged in to {action}"


def category_not_found(category_id: int) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"


def donator_not_found(donator_id: int) -> str:
    """Return message for missing donator by ID."""
    return f"Donator {donator_id} not found"


def invalid_position(position: int, max_positions: int) -> str:
    """Return message for a roster position outside the allowed range."""
    return f"Position must be between 1 and {max_positions}, got {position}"


def category_delete_blocked(category_id: int, donator_count: int) -> str:
    """Return message when a category still has donators."""
    return (
        f"Cannot delete category {category_id}: it has "
        f"{donator_count} donator{'s' if donator_count != 1 else ''}. "
        "Please reassign or delete them first."
    )
