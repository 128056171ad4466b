"""Dependency container wiring for the library."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from pantry_tracker.adapters.openai_label_client import OpenAILabelClient
from pantry_tracker.adapters.supabase_storage import SupabaseStorage
from pantry_tracker.app_logging import configure_logging
from pantry_tracker.config import Settings, parse_timezone
from pantry_tracker.services.activity import DailyActivityService
from pantry_tracker.services.drafts import DraftService
from pantry_tracker.services.inventory import InventoryService
from pantry_tracker.services.labels import LabelExtractionService
from pantry_tracker.services.ledger import ConsumptionLedger
from pantry_tracker.services.profiles import ProfileService
from pantry_tracker.services.stats import StatsService
from pantry_tracker.services.storage import InMemoryStorage, KeyValueStorage
from pantry_tracker.services.timemath import Clock, system_clock


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    storage: KeyValueStorage
    clock: Clock
    inventory_service: InventoryService
    ledger: ConsumptionLedger
    activity_service: DailyActivityService
    stats_service: StatsService
    label_service: LabelExtractionService
    draft_service: DraftService
    profile_service: ProfileService
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None,
    storage: KeyValueStorage | None = None,
    clock: Clock | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    configure_logging()
    resolved_settings = settings or Settings()
    resolved_storage = storage or _build_storage(resolved_settings)
    resolved_clock = clock or system_clock(parse_timezone(resolved_settings.timezone))

    ledger = ConsumptionLedger(resolved_storage)
    activity_service = DailyActivityService(resolved_storage, resolved_clock)
    inventory_service = InventoryService(
        storage=resolved_storage,
        ledger=ledger,
        activity=activity_service,
        clock=resolved_clock,
    )
    stats_service = StatsService(
        inventory=inventory_service,
        ledger=ledger,
        activity=activity_service,
        clock=resolved_clock,
        expiring_soon_days=resolved_settings.expiring_soon_days,
    )
    label_client = (
        OpenAILabelClient.create(resolved_settings.openai_api_key)
        if resolved_settings.openai_api_key
        else None
    )
    label_service = LabelExtractionService(
        client=label_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
        timeout_seconds=resolved_settings.label_timeout_seconds,
    )
    draft_service = DraftService(
        inventory=inventory_service,
        labels=label_service,
        clock=resolved_clock,
    )

    async def close_resources() -> None:
        if label_client is not None:
            await label_client.close()

    return AppContainer(
        settings=resolved_settings,
        storage=resolved_storage,
        clock=resolved_clock,
        inventory_service=inventory_service,
        ledger=ledger,
        activity_service=activity_service,
        stats_service=stats_service,
        label_service=label_service,
        draft_service=draft_service,
        profile_service=ProfileService(resolved_storage),
        close_resources=close_resources,
    )


def _build_storage(settings: Settings) -> KeyValueStorage:
    if settings.supabase_url and settings.supabase_service_key:
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseStorage(client, table=settings.storage_table)
    return InMemoryStorage()
