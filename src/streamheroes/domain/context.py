"""Acting-user context passed explicitly into every service call."""

from dataclasses import dataclass
from typing import Optional

from streamheroes.domain.errors import AuthRequired, ValidationError, auth_required


@dataclass(frozen=True)
class ActorContext:
    """Identity that owns and scopes every record it creates.

    ``actor`` is the user's email, or None when nobody is authenticated.
    """

    actor: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.actor is not None

    def require_actor(self, action: str) -> str:
        """Return the actor, or raise AuthRequired naming the attempted action."""
        if self.actor is None:
            raise AuthRequired(auth_required(action))
        return self.actor


def resolve_actor(value: Optional[str]) -> ActorContext:
    """Build an ActorContext from a raw identity string.

    Args:
        value: Email address (from --actor or STREAMHEROES_ACTOR), or None

    Returns:
        ActorContext; unauthenticated if value is None or blank

    Raises:
        ValidationError: If value is not an email address
    """
    if value is None or not value.strip():
        return ActorContext(actor=None)

    email = value.strip().lower()
    local, _, domain = email.partition("@")
    if not local or not domain:
        raise ValidationError(f"Actor must be an email address, got '{value}'")
    return ActorContext(actor=email)
