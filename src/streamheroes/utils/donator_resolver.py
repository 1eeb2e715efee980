"""Utility for resolving donator names to IDs."""

from typing import TYPE_CHECKING

from streamheroes.domain.errors import ConflictError, NotFoundError

if TYPE_CHECKING:
    from streamheroes.domain.context import ActorContext
    from streamheroes.domain.donator import DonatorService


def resolve_donator(donator_service: "DonatorService", ctx: "ActorContext", donator: str | int) -> int:
    """Resolve donator name or ID to donator ID.

    Args:
        donator_service: DonatorService instance
        ctx: Acting user
        donator: Donator name (case-insensitive) or ID (int or numeric string)
            A numeric string is tried as an ID first, then as a name

    Returns:
        Donator ID

    Raises:
        NotFoundError: If no donator matches
        ConflictError: If the name matches more than one donator
    """
    if isinstance(donator, int):
        return donator_service.get_donator(ctx, donator).donator.id

    if donator.strip().isdigit():
        try:
            return donator_service.get_donator(ctx, int(donator)).donator.id
        except NotFoundError:
            # Digits that are not an ID may still be a donator's name
            pass

    wanted = donator.strip().lower()
    matches = [
        details.donator
        for details in donator_service.list_donators(ctx)
        if details.donator.name.lower() == wanted
    ]
    if not matches:
        raise NotFoundError(f"Donator '{donator}' not found")
    if len(matches) > 1:
        ids = ", ".join(str(d.id) for d in matches)
        raise ConflictError(f"Donator name '{donator}' is ambiguous (IDs: {ids}); use the ID instead")
    return matches[0].id
