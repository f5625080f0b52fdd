"""
Bike listing business logic.

Every operation runs at most one statement. Store faults become 500s through
`store_errors`; a missing row and an unparseable id are both 404.

Ids are parsed strictly: `12abc` or `12.5` is not a prefix-parsed 12, as a
lenient integer parse would make it, but simply no such listing. The same rule
applies to get, update and delete.
"""

from __future__ import annotations

from core.errors import NotFound, store_errors

from . import repository, schemas

# Upper bound of a Postgres `serial` column.
_MAX_BIKE_ID = 2_147_483_647

BIKE_NOT_FOUND = "Bike not found"


def parse_bike_id(raw: str) -> int | None:
    """
    Return the numeric id in `raw`, or None when it cannot name a row.
    """
    raw = (raw or "").strip()
    if not raw.isascii() or not raw.isdigit():
        return None
    value = int(raw)
    if value > _MAX_BIKE_ID:
        return None
    return value


def _require_id(raw: str) -> int:
    bike_id = parse_bike_id(raw)
    if bike_id is None:
        raise NotFound(BIKE_NOT_FOUND)
    return bike_id


def _fields(payload: schemas.BikeRequest) -> dict[str, str]:
    return payload.model_dump(include=set(schemas.BIKE_FIELDS))


async def list_bikes() -> list[dict]:
    with store_errors("list_bikes"):
        return await repository.list_bikes()


async def get_bike(raw_id: str) -> dict:
    bike_id = _require_id(raw_id)
    with store_errors("get_bike", bike_id=bike_id):
        row = await repository.get_bike(bike_id)
    if row is None:
        raise NotFound(BIKE_NOT_FOUND)
    return row


async def create_bike(payload: schemas.BikeRequest) -> dict:
    with store_errors("create_bike"):
        return await repository.create_bike(**_fields(payload))


async def update_bike(raw_id: str, payload: schemas.BikeRequest) -> dict:
    bike_id = _require_id(raw_id)
    with store_errors("update_bike", bike_id=bike_id):
        row = await repository.update_bike(bike_id, **_fields(payload))
    if row is None:
        raise NotFound(BIKE_NOT_FOUND)
    return row


async def delete_bike(raw_id: str) -> dict:
    bike_id = _require_id(raw_id)
    with store_errors("delete_bike", bike_id=bike_id):
        row = await repository.delete_bike(bike_id)
    if row is None:
        raise NotFound(BIKE_NOT_FOUND)
    return row
