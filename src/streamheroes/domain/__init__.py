"""Domain layer for streamheroes application."""

from importlib import import_module

# Services import the database layer, which imports domain.entities, so the
# exports below are resolved on first access instead of at package import.
_EXPORTS = {
    "CategoryService": "streamheroes.domain.category",
    "DonatorService": "streamheroes.domain.donator",
    "CurrentGameService": "streamheroes.domain.current_game",
    "GameSessionService": "streamheroes.domain.game_session",
    "DonationHistoryService": "streamheroes.domain.donation_history",
    "AnalyticsService": "streamheroes.domain.analytics",
    "ActorContext": "streamheroes.domain.context",
    "resolve_actor": "streamheroes.domain.context",
}

__all__ = list(_EXPORTS)


def __getattr__(name):
    if name in _EXPORTS:
        return getattr(import_module(_EXPORTS[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
