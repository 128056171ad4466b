"""Tests for container wiring."""

import asyncio

from pantry_tracker.config import Settings
from pantry_tracker.containers import build_container
from pantry_tracker.services.storage import InMemoryStorage


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert isinstance(container.storage, InMemoryStorage)
    assert container.label_service.client is None
    assert container.stats_service.expiring_soon_days == 3
    assert container.clock().tzinfo is not None
    asyncio.run(container.close_resources())


def test_build_container_with_openai_key(settings: Settings) -> None:
    configured = settings.model_copy(
        update={"openai_api_key": "openai-key", "label_timeout_seconds": 5.0}
    )

    container = build_container(configured)

    assert container.label_service.client is not None
    assert container.label_service.timeout_seconds == 5.0
    asyncio.run(container.close_resources())


def test_services_share_one_storage(settings: Settings) -> None:
    container = build_container(settings)

    assert container.inventory_service.storage is container.storage
    assert container.ledger.storage is container.storage
    assert container.activity_service.storage is container.storage
    assert container.profile_service.storage is container.storage
