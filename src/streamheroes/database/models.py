"""SQLAlchemy models for streamheroes database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Numeric,
    UniqueConstraint,
    CheckConstraint,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Category(Base):
    """Supporter tier model."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    price = Column(Numeric(14, 2), nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    created_by = Column(String, nullable=True, index=True)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_by = Column(String, nullable=True)

    __table_args__ = (CheckConstraint("price >= 0", name="ck_category_price_non_negative"),)

    # Relationships
    donators = relationship("Donator", back_populates="category")


class Donator(Base):
    """Donator model."""

    __tablename__ = "donators"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    total_game = Column(Integer, default=0, nullable=False)
    total_donation = Column(Numeric(14, 2), default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    created_by = Column(String, nullable=True, index=True)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_by = Column(String, nullable=True)

    # Relationships
    category = relationship("Category", back_populates="donators")
    slots = relationship("CurrentGame", back_populates="donator", cascade="all, delete-orphan")


class CurrentGame(Base):
    """Current game roster slot model."""

    __tablename__ = "current_game"

    id = Column(Integer, primary_key=True)
    donator_id = Column(Integer, ForeignKey("donators.id"), nullable=False)
    position = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    created_by = Column(String, nullable=True)

    # One row per position and one row per donator for each actor
    __table_args__ = (
        UniqueConstraint("created_by", "position", name="uq_current_game_position"),
        UniqueConstraint("created_by", "donator_id", name="uq_current_game_donator"),
        CheckConstraint("position BETWEEN 1 AND 4", name="ck_current_game_position"),
    )

    # Relationships
    donator = relationship("Donator", back_populates="slots")


class GameSession(Base):
    """Game session participation model (append-only)."""

    __tablename__ = "game_sessions"

    id = Column(Integer, primary_key=True)
    session_id = Column(String(36), nullable=False, index=True)
    # No FK: history survives donator deletion
    donator_id = Column(Integer, nullable=False)
    played_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    created_by = Column(String, nullable=True)

    __table_args__ = (Index("ix_game_sessions_actor_played", "created_by", "played_at"),)


class DonationHistory(Base):
    """Donation ledger model (append-only)."""

    __tablename__ = "donations_history"

    id = Column(Integer, primary_key=True)
    donator_id = Column(Integer, nullable=False, index=True)
    amount = Column(Numeric(14, 2), nullable=False)
    event_type = Column(String, nullable=False)
    games_added = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    created_by = Column(String, nullable=True)

    __table_args__ = (Index("ix_donations_history_actor_created", "created_by", "created_at"),)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
