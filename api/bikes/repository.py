"""
Bike listing persistence (raw SQL).
"""

from __future__ import annotations

from core import db

_COLUMNS = "id, url, name, model, engine, fuel, color, warranty"


async def list_bikes() -> list[dict]:
    return await db.fetch_all(f"SELECT {_COLUMNS} FROM bikes")


async def get_bike(bike_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM bikes
        WHERE id = $1
        """,
        bike_id,
    )


async def create_bike(
    *,
    url: str,
    name: str,
    model: str,
    engine: str,
    fuel: str,
    color: str,
    warranty: str,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO bikes (url, name, model, engine, fuel, color, warranty)
        VALUES ($1, $2, $3, $4, $5, $6, $7)
        RETURNING {_COLUMNS}
        """,
        url,
        name,
        model,
        engine,
        fuel,
        color,
        warranty,
    )
    if row is None:
        raise RuntimeError("Failed to create bike.")
    return row


async def update_bike(
    bike_id: int,
    *,
    url: str,
    name: str,
    model: str,
    engine: str,
    fuel: str,
    color: str,
    warranty: str,
) -> dict | None:
    return await db.fetch_one(
        f"""
        UPDATE bikes
        SET url = $1, name = $2, model = $3, engine = $4,
            fuel = $5, color = $6, warranty = $7
        WHERE id = $8
        RETURNING {_COLUMNS}
        """,
        url,
        name,
        model,
        engine,
        fuel,
        color,
        warranty,
        bike_id,
    )


async def delete_bike(bike_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        DELETE FROM bikes
        WHERE id = $1
        RETURNING {_COLUMNS}
        """,
        bike_id,
    )
