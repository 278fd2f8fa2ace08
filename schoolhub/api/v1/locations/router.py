from typing import List

from fastapi import APIRouter, HTTPException

from schoolhub.core.exceptions import ServiceError

from .schemas import City, Country, State
from . import service

router = APIRouter(prefix="/api/v1/locations", tags=["locations"])


@router.get("/countries", response_model=List[Country])
async def list_countries() -> List[Country]:
    try:
        return await service.get_countries()
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/countries/{country_id}/states", response_model=List[State])
async def list_states(country_id: int) -> List[State]:
    try:
        return await service.get_states_by_country(country_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/states/{state_id}/cities", response_model=List[City])
async def list_cities(state_id: int) -> List[City]:
    try:
        return await service.get_cities_by_state(state_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
