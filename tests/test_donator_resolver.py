"""Tests for resolving donator names and IDs."""

import pytest

from streamheroes.cli.main import cli
from streamheroes.domain.errors import ConflictError, NotFoundError
from streamheroes.utils.donator_resolver import resolve_donator


def test_resolve_by_id(donator_service, sample_donators, actor):
    budi = sample_donators["Budi"]

    assert resolve_donator(donator_service, actor, budi) == budi
    assert resolve_donator(donator_service, actor, str(budi)) == budi


def test_resolve_by_name_ignores_case(donator_service, sample_donators, actor):
    assert resolve_donator(donator_service, actor, "  dEWi ") == sample_donators["Dewi"]


def test_numeric_name_resolves_when_not_an_id(donator_service, sample_categories, actor):
    created = donator_service.create_donator(
        actor, name="777", category_id=sample_categories["Bronze"].id, total_game=1
    )

    assert resolve_donator(donator_service, actor, "777") == created.donator.id


def test_id_wins_over_numeric_name(donator_service, sample_categories, sample_donators, actor):
    budi = sample_donators["Budi"]
    donator_service.create_donator(
        actor, name=str(budi), category_id=sample_categories["Bronze"].id, total_game=1
    )

    assert resolve_donator(donator_service, actor, str(budi)) == budi


def test_unknown_donator(donator_service, sample_donators, actor):
    with pytest.raises(NotFoundError, match="'999' not found"):
        resolve_donator(donator_service, actor, "999")


def test_ambiguous_name(donator_service, sample_categories, sample_donators, actor):
    donator_service.create_donator(
        actor, name="andi", category_id=sample_categories["Gold"].id, total_game=1
    )

    with pytest.raises(ConflictError, match="ambiguous"):
        resolve_donator(donator_service, actor, "Andi")


def test_cli_show_numeric_name(cli_runner, cli_args, donator_service, sample_categories, actor):
    donator_service.create_donator(
        actor, name="7", category_id=sample_categories["Silver"].id, total_game=2
    )

    result = cli_runner.invoke(cli, cli_args + ["donator", "show", "7"])

    assert result.exit_code == 0
    assert "Name:            7" in result.output
    assert "Category:        Silver" in result.output
