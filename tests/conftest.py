"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from pantry_tracker.config import Settings
from pantry_tracker.containers import AppContainer, build_container
from pantry_tracker.services.labels import LabelClient
from pantry_tracker.services.storage import InMemoryStorage


@dataclass
class FixedClock:
    """Clock returning a settable instant."""

    now: datetime = field(
        default_factory=lambda: datetime(2024, 6, 5, 10, 0, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


@dataclass
class FakeLabelClient(LabelClient):
    """Fake label client returning a fixed payload."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "name": "酸奶",
            "category": "dairy",
            "productionDate": "2024-06-01",
            "shelfLifeValue": 21,
            "shelfLifeUnit": "day",
        }
    )
    calls: list[str] = field(default_factory=list)

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        self.calls.append(image_data_url)
        return self.payload


@dataclass
class FailingLabelClient(LabelClient):
    """Label client that always raises."""

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        raise RuntimeError("network down")


@dataclass
class RecordingStorage(InMemoryStorage):
    """In-memory storage that remembers which keys were written."""

    writes: list[str]

    def __init__(self) -> None:
        super().__init__()
        self.writes = []

    def set(self, key: str, value: object) -> None:
        self.writes.append(key)
        super().set(key, value)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url=None,
        supabase_service_key=None,
        openai_api_key=None,
        timezone="UTC",
    )


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def storage() -> RecordingStorage:
    return RecordingStorage()


@pytest.fixture
def container(
    settings: Settings, storage: RecordingStorage, clock: FixedClock
) -> AppContainer:
    return build_container(settings, storage=storage, clock=clock)
