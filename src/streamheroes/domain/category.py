"""Category domain service."""

import logging
from decimal import Decimal
from typing import Optional
from streamheroes.database.base import Database
from streamheroes.domain.context import ActorContext
from streamheroes.domain.entities import Category as CategoryEntity
from streamheroes.domain.errors import (
    DependencyError,
    NotFoundError,
    ValidationError,
    category_delete_blocked,
    category_not_found,
)
from streamheroes.utils.amount_parser import parse_amount

logger = logging.getLogger(__name__)


def validate_price(price: str | int | float | Decimal) -> Decimal:
    """Parse a category price and check it is non-negative.

    Raises:
        ValidationError: If the price cannot be parsed or is negative
    """
    try:
        value = parse_amount(price)
    except ValueError as e:
        raise ValidationError(str(e))
    if value < 0:
        raise ValidationError("Price must be 0 or greater")
    return value


def validate_name(name: Optional[str], entity: str) -> str:
    """Strip a display name and reject empty ones."""
    if name is None or not name.strip():
        raise ValidationError(f"{entity} name is required")
    return name.strip()


class CategoryService:
    """Service for managing supporter tiers."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def list_categories(self, ctx: ActorContext) -> list[CategoryEntity]:
        """List the actor's categories ordered by name."""
        actor = ctx.require_actor("view their categories")
        return self.db.list_categories(actor)

    def get_category(self, ctx: ActorContext, category_id: int) -> CategoryEntity:
        """Get category by ID.

        Raises:
            NotFoundError: If the category does not exist for this actor
        """
        actor = ctx.require_actor("view a category")
        category = self.db.get_category(actor, category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        return category

    def create_category(
        self, ctx: ActorContext, name: str, price: str | int | float | Decimal
    ) -> CategoryEntity:
        """Create a category.

        Args:
            ctx: Acting user
            name: Category name
            price: Price per game; strings like "Rp 15.000" are accepted

        Returns:
            Created category

        Raises:
            ValidationError: If name is empty or price is invalid or negative
        """
        actor = ctx.require_actor("create a category")
        name = validate_name(name, "Category")
        value = validate_price(price)

        category_id = self.db.create_category(actor, name=name, price=value)
        logger.info("Category %s '%s' created by %s (price %s)", category_id, name, actor, value)
        return self.get_category(ctx, category_id)

    def update_category(
        self,
        ctx: ActorContext,
        category_id: int,
        name: Optional[str] = None,
        price: Optional[str | int | float | Decimal] = None,
    ) -> CategoryEntity:
        """Update a category's name and/or price.

        Existing donators keep their stored total_donation; the new price
        applies the next time their total is recomputed.

        Raises:
            NotFoundError: If the category does not exist for this actor
            ValidationError: If name is empty or price is invalid or negative
        """
        actor = ctx.require_actor("update a category")
        if name is not None:
            name = validate_name(name, "Category")
        value = validate_price(price) if price is not None else None

        self.get_category(ctx, category_id)
        self.db.update_category(actor, category_id, name=name, price=value)
        logger.info("Category %s updated by %s", category_id, actor)
        return self.get_category(ctx, category_id)

    def delete_category(self, ctx: ActorContext, category_id: int) -> None:
        """Delete a category.

        Raises:
            NotFoundError: If the category does not exist for this actor
            DependencyError: If donators still belong to the category
        """
        actor = ctx.require_actor("delete a category")
        self.get_category(ctx, category_id)

        donator_count = self.db.get_category_donator_count(actor, category_id)
        if donator_count > 0:
            logger.warning("Refusing to delete category %s with %d donators", category_id, donator_count)
            raise DependencyError(category_delete_blocked(category_id, donator_count))

        self.db.delete_category(actor, category_id)
        logger.info("Category %s deleted by %s", category_id, actor)
