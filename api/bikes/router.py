"""
Bike listing API endpoints.

Reads are public; create, update and delete require an admin token. The body
of a protected write is parsed only after the token check, so a request
without a token is a 401 whatever its body looks like.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from auth import dependencies as auth_dependencies
from core.requests import parse_body

from . import schemas, service

router = APIRouter(prefix="/api/bikes")


async def admin_bike_payload(
    request: Request,
    _: dict = Depends(auth_dependencies.require_admin),
) -> schemas.BikeRequest:
    return await parse_body(request, schemas.BikeRequest)


@router.get("")
async def list_bikes() -> list[dict]:
    return await service.list_bikes()


@router.get("/{bike_id}")
async def get_bike(bike_id: str) -> dict:
    return await service.get_bike(bike_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_bike(
    payload: schemas.BikeRequest = Depends(admin_bike_payload),
) -> dict:
    bike = await service.create_bike(payload)
    return {"message": "Bike added successfully", "bike": bike}


@router.put("/{bike_id}")
async def update_bike(
    bike_id: str,
    payload: schemas.BikeRequest = Depends(admin_bike_payload),
) -> dict:
    bike = await service.update_bike(bike_id, payload)
    return {"message": "Bike updated successfully", "bike": bike}


@router.delete("/{bike_id}")
async def delete_bike(
    bike_id: str,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    await service.delete_bike(bike_id)
    return {"message": "Bike deleted successfully"}
