"""Food label extraction using LLM vision."""

import asyncio
import base64
import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError as PydanticValidationError

from pantry_tracker.domain.labels import LabelDraft

_logger = logging.getLogger(__name__)

LABEL_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "category": {
            "type": "string",
            "description": "One of: vegetables, fruits, dairy, meat, fish, others",
        },
        "productionDate": {"anyOf": [{"type": "string"}, {"type": "null"}]},
        "shelfLifeValue": {"anyOf": [{"type": "number"}, {"type": "null"}]},
        "shelfLifeUnit": {
            "anyOf": [
                {"type": "string", "enum": ["day", "month", "year"]},
                {"type": "null"},
            ]
        },
    },
    "required": [
        "name",
        "category",
        "productionDate",
        "shelfLifeValue",
        "shelfLifeUnit",
    ],
    "additionalProperties": False,
}

LABEL_PROMPT = (
    "Analyze this food label/package. Extract the food name, the most suitable "
    "category (vegetables, fruits, dairy, meat, fish, others), production date "
    "(if visible, format YYYY-MM-DD), and shelf life duration (numeric value and "
    "unit: day, month, year). Use null for anything that is not visible."
)


class LabelClient(Protocol):
    """Interface for LLM label extraction."""

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
        """Return structured label data."""


@dataclass
class LabelExtractionService:
    """Reads package labels; failures yield no draft instead of an error."""

    client: LabelClient | None
    model: str
    reasoning_effort: str | None
    store: bool
    timeout_seconds: float = 20.0

    async def extract(self, image_bytes: bytes) -> LabelDraft | None:
        """Return a partial draft read from the image, or None."""
        if self.client is None:
            return None
        data_url = _to_data_url(image_bytes)
        try:
            raw = await asyncio.wait_for(
                self.client.extract(
                    model=self.model,
                    reasoning_effort=self.reasoning_effort,
                    store=self.store,
                    image_data_url=data_url,
                    schema=LABEL_SCHEMA,
                    prompt=LABEL_PROMPT,
                ),
                timeout=self.timeout_seconds,
            )
        except TimeoutError:
            _logger.warning(
                "Label extraction timed out after %ss", self.timeout_seconds
            )
            return None
        except Exception:
            _logger.exception("Label extraction failed")
            return None

        try:
            return LabelDraft.model_validate(raw)
        except PydanticValidationError as exc:
            _logger.warning("Label extraction returned malformed data: %s", exc)
            return None


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
