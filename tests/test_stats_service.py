"""Tests for stats service."""

from datetime import date

from pantry_tracker.containers import AppContainer
from pantry_tracker.domain.inventory import (
    Category,
    ConsumptionReason,
    Ingredient,
    QuantityUnit,
    ShelfLifeUnit,
)

USER = "user_1"


def _add(
    container: AppContainer, name: str, production: date, days: int
) -> Ingredient:
    return container.inventory_service.create(
        user_id=USER,
        name=name,
        category=None,
        production_date=production,
        shelf_life_value=days,
        shelf_life_unit=ShelfLifeUnit.DAY,
        initial_quantity=100,
        quantity_unit=QuantityUnit.G,
    )


def test_summarize_counts_risk_tiers(container: AppContainer) -> None:
    # The clock reads 2024-06-05 10:00 UTC.
    _add(container, "牛奶", date(2024, 6, 1), 1)  # expired
    _add(container, "鸡肉", date(2024, 6, 1), 4)  # expires today, 0 days
    _add(container, "苹果", date(2024, 6, 5), 3)  # 3 days left
    _add(container, "土豆", date(2024, 6, 5), 4)  # 4 days left
    _add(container, "鱼丸", date(2024, 6, 5), 30)

    summary = container.stats_service.summarize(USER)

    assert summary.total == 5
    assert summary.expired == 1
    assert summary.expiring_soon == 2


def test_summarize_per_category_includes_zero_counts(container: AppContainer) -> None:
    _add(container, "牛奶", date(2024, 6, 5), 7)
    _add(container, "酸奶", date(2024, 6, 5), 7)
    _add(container, "虾", date(2024, 6, 5), 7)

    summary = container.stats_service.summarize(USER)

    assert [entry.category for entry in summary.per_category] == list(Category)
    counts = {entry.category: entry.count for entry in summary.per_category}
    assert counts[Category.DAIRY] == 2
    assert counts[Category.FISH] == 1
    assert counts[Category.VEGETABLES] == 0
    assert summary.per_category[2].label == "乳制品"


def test_summarize_ignores_inactive_items(container: AppContainer) -> None:
    milk = _add(container, "牛奶", date(2024, 6, 1), 1)
    container.inventory_service.consume(USER, milk.id, 100, ConsumptionReason.DISCARD)

    summary = container.stats_service.summarize(USER)

    assert summary.total == 0
    assert summary.expired == 0


def test_at_risk_unions_expired_and_expiring(container: AppContainer) -> None:
    expired = _add(container, "牛奶", date(2024, 6, 1), 1)
    soon = _add(container, "苹果", date(2024, 6, 5), 3)
    _add(container, "土豆", date(2024, 6, 5), 4)

    summary = container.stats_service.summarize(USER)
    at_risk = container.stats_service.at_risk(USER)

    assert [item.id for item in at_risk] == [expired.id, soon.id]
    assert len(at_risk) == summary.expired + summary.expiring_soon


def test_summarize_recomputes_as_time_passes(container: AppContainer, clock) -> None:
    _add(container, "苹果", date(2024, 6, 5), 3)

    assert container.stats_service.summarize(USER).expiring_soon == 1
    clock.advance(days=4)

    summary = container.stats_service.summarize(USER)
    assert summary.expiring_soon == 0
    assert summary.expired == 1


def test_activity_totals(container: AppContainer) -> None:
    milk = _add(container, "牛奶", date(2024, 6, 5), 7)
    apple = _add(container, "苹果", date(2024, 6, 5), 7)
    container.inventory_service.consume(USER, milk.id, 30, ConsumptionReason.COOKING)
    container.inventory_service.consume(USER, apple.id, 100, ConsumptionReason.DISCARD)

    totals = container.stats_service.activity_totals(USER)

    assert totals.ingredients_entered == 2
    assert totals.consumption_count == 2
    assert totals.consumed_quantity == 130
    assert totals.discard_count == 1
    assert totals.cooked_days == 1
