"""Snapshot codec for the food log.

The persisted form is a UTF-8 JSON document::

    {"version": 1,
     "daily": [<entry>, ...],
     "history": {"2024-01-01": [<entry>, ...], ...}}

Macro fields are strict integers so a fractional value is rejected instead of
being truncated. ``grams`` is always written as a float.
"""

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationError
from pydantic_core import PydanticSerializationError

from nutriai.domain.errors import SnapshotDecodeError, SnapshotEncodeError
from nutriai.domain.foods import FoodEntry

SNAPSHOT_VERSION = 1

History = dict[date, list[FoodEntry]]


class EntryPayload(BaseModel):
    """Serialised food entry."""

    id: StrictStr
    name: StrictStr
    grams: float = Field(allow_inf_nan=False)
    calories: StrictInt
    protein: StrictInt
    fat: StrictInt
    carb: StrictInt


class SnapshotPayload(BaseModel):
    """Serialised food log state."""

    version: Literal[1] = SNAPSHOT_VERSION
    daily: list[EntryPayload]
    history: dict[date, list[EntryPayload]]


def encode_entry(entry: FoodEntry) -> bytes:
    """Serialise a single entry."""
    return _dump(_entry_payload(entry))


def decode_entry(data: bytes) -> FoodEntry:
    """Deserialise a single entry produced by :func:`encode_entry`."""
    try:
        payload = EntryPayload.model_validate_json(data)
    except ValidationError as exc:
        raise SnapshotDecodeError(f"Malformed entry: {exc}") from exc
    return _entry_from_payload(payload)


def encode_log(daily: list[FoodEntry], history: History) -> bytes:
    """Serialise the open day and archived history."""
    try:
        payload = SnapshotPayload(
            daily=[_entry_payload(entry) for entry in daily],
            history={
                day: [_entry_payload(entry) for entry in history[day]]
                for day in sorted(history)
            },
        )
    except ValidationError as exc:
        raise SnapshotEncodeError(f"Cannot encode log: {exc}") from exc
    return _dump(payload)


def decode_log(data: bytes | None) -> tuple[list[FoodEntry], History]:
    """Deserialise bytes produced by :func:`encode_log`."""
    if not data:
        raise SnapshotDecodeError("Empty snapshot")
    try:
        payload = SnapshotPayload.model_validate_json(data)
    except ValidationError as exc:
        raise SnapshotDecodeError(f"Malformed snapshot: {exc}") from exc
    daily = [_entry_from_payload(item) for item in payload.daily]
    history = {
        day: [_entry_from_payload(item) for item in items]
        for day, items in payload.history.items()
    }
    return daily, history


def _dump(payload: BaseModel) -> bytes:
    try:
        return payload.model_dump_json().encode("utf-8")
    except (PydanticSerializationError, UnicodeEncodeError) as exc:
        raise SnapshotEncodeError(f"Cannot serialise snapshot: {exc}") from exc


def _entry_payload(entry: FoodEntry) -> EntryPayload:
    try:
        return EntryPayload(
            id=entry.id,
            name=entry.name,
            grams=entry.grams,
            calories=entry.calories,
            protein=entry.protein,
            fat=entry.fat,
            carb=entry.carb,
        )
    except ValidationError as exc:
        raise SnapshotEncodeError(f"Cannot encode entry {entry.id}: {exc}") from exc


def _entry_from_payload(payload: EntryPayload) -> FoodEntry:
    return FoodEntry(
        id=payload.id,
        name=payload.name,
        grams=payload.grams,
        calories=payload.calories,
        protein=payload.protein,
        fat=payload.fat,
        carb=payload.carb,
    )
