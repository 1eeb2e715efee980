"""Shared pytest fixtures for streamheroes tests."""

import tempfile
import os
import pytest

from streamheroes.database.factories import create_sqlite_database
from streamheroes.domain.context import ActorContext
from streamheroes.domain.analytics import AnalyticsService
from streamheroes.domain.category import CategoryService
from streamheroes.domain.current_game import CurrentGameService
from streamheroes.domain.donation_history import DonationHistoryService
from streamheroes.domain.donator import DonatorService
from streamheroes.domain.game_session import GameSessionService

ACTOR_EMAIL = "streamer@example.com"
OTHER_ACTOR_EMAIL = "rival@example.com"


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def actor():
    """Context for the streamer owning the test data."""
    return ActorContext(actor=ACTOR_EMAIL)


@pytest.fixture
def other_actor():
    """Context for a second, unrelated streamer."""
    return ActorContext(actor=OTHER_ACTOR_EMAIL)


@pytest.fixture
def anonymous():
    """Context with nobody logged in."""
    return ActorContext(actor=None)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def donator_service(temp_db):
    """Create a DonatorService with a temporary database."""
    return DonatorService(temp_db)


@pytest.fixture
def current_game_service(temp_db):
    """Create a CurrentGameService with a temporary database."""
    return CurrentGameService(temp_db)


@pytest.fixture
def game_session_service(temp_db):
    """Create a GameSessionService with a temporary database."""
    return GameSessionService(temp_db)


@pytest.fixture
def history_service(temp_db):
    """Create a DonationHistoryService with a temporary database."""
    return DonationHistoryService(temp_db)


@pytest.fixture
def analytics_service(temp_db):
    """Create an AnalyticsService with a temporary database."""
    return AnalyticsService(temp_db)


@pytest.fixture
def sample_categories(category_service, actor):
    """Create Bronze/Silver/Gold tiers and return them by name."""
    return {
        name: category_service.create_category(actor, name=name, price=price)
        for name, price in [("Bronze", 15000), ("Silver", 25000), ("Gold", 50000)]
    }


@pytest.fixture
def sample_donators(donator_service, sample_categories, actor):
    """Create five donators and return their IDs by name."""
    rows = [
        ("Andi", "Bronze", 3),
        ("Budi", "Silver", 2),
        ("Citra", "Gold", 1),
        ("Dewi", "Bronze", 5),
        ("Eko", "Silver", 4),
    ]
    return {
        name: donator_service.create_donator(
            actor, name=name, category_id=sample_categories[tier].id, total_game=games
        ).donator.id
        for name, tier, games in rows
    }


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def cli_args(temp_db):
    """Common root options pointing the CLI at the temp database as the test actor."""
    return ["--db-path", temp_db.database_path, "--actor", ACTOR_EMAIL]
