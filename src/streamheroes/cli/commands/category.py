"""Category management commands."""

import click
from streamheroes.cli.error_handling import handle_domain_error
from streamheroes.domain.category import CategoryService
from streamheroes.domain.errors import DomainError
from streamheroes.utils.amount_parser import format_rupiah


@click.group()
def category_group():
    """Manage supporter categories and their prices."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all categories."""
    service = CategoryService(ctx.obj["db"])

    try:
        categories = service.list_categories(ctx.obj["actor"])
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not categories:
        click.echo("No categories found. Create one with 'category create NAME --price PRICE'.")
        return

    click.echo("\nCategories:")
    click.echo("-" * 50)
    for cat in categories:
        click.echo(f"ID: {cat.id:3d} | {cat.name:20s} | {format_rupiah(cat.price)} / game")


@category_group.command("create")
@click.argument("name")
@click.option("--price", required=True, help="Price per game (e.g., 15000 or 'Rp 15.000')")
@click.pass_context
def create_category(ctx, name: str, price: str):
    """Create a new category.

    Examples:
        streamheroes category create Bronze --price 15000
        streamheroes category create "Gold Tier" --price "Rp 50.000"
    """
    service = CategoryService(ctx.obj["db"])

    try:
        category = service.create_category(ctx.obj["actor"], name=name, price=price)
        click.echo(
            f"Created category '{category.name}' at {format_rupiah(category.price)} per game (ID: {category.id})"
        )
    except DomainError as e:
        handle_domain_error(ctx, e)


@category_group.command("update")
@click.argument("category_id", type=int)
@click.option("--name", help="New category name")
@click.option("--price", help="New price per game")
@click.pass_context
def update_category(ctx, category_id: int, name: str | None, price: str | None):
    """Update a category's name and/or price.

    Existing donators keep their totals until their game count changes.
    """
    if name is None and price is None:
        click.echo("Error: Nothing to update. Use --name and/or --price.", err=True)
        ctx.exit(1)

    service = CategoryService(ctx.obj["db"])

    try:
        category = service.update_category(ctx.obj["actor"], category_id, name=name, price=price)
        click.echo(f"Updated category '{category.name}' ({format_rupiah(category.price)} per game)")
    except DomainError as e:
        handle_domain_error(ctx, e)


@category_group.command("delete")
@click.argument("category_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_category(ctx, category_id: int, yes: bool):
    """Delete a category that has no donators."""
    service = CategoryService(ctx.obj["db"])
    actor = ctx.obj["actor"]

    try:
        category = service.get_category(actor, category_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(f"Are you sure you want to delete category '{category.name}'?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_category(actor, category_id)
        click.echo(f"Deleted category '{category.name}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
