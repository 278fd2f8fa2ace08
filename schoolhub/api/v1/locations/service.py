"""Country / state / city lookups over the configured locations dataset.

The dataset is a JSON list of countries, each with nested ``states`` that
carry nested ``cities``. It is read from ``LOCATIONS_FILE`` when that is set,
otherwise fetched from ``LOCATIONS_API_URL``, on every call.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from fastapi import status
from fastapi.concurrency import run_in_threadpool

from schoolhub.core.config import settings
from schoolhub.core.exceptions import NotFoundError, ServiceError
from schoolhub.core.logging import get_logger
from schoolhub.utils.request_client import request

from .schemas import City, Country, State

logger = get_logger(__name__)


def _unavailable() -> ServiceError:
    return ServiceError("Location data is unavailable", status.HTTP_502_BAD_GATEWAY)


async def _read_file(path: str) -> Any:
    try:
        text = await run_in_threadpool(Path(path).read_text, encoding="utf-8")
        return json.loads(text)
    except (OSError, ValueError) as exc:
        logger.error("locations_file_unreadable", path=path, error=str(exc))
        raise _unavailable()


async def _fetch(url: str) -> Any:
    try:
        return await request(url, timeout=settings.locations_timeout_seconds)
    except TypeError as exc:
        logger.error("locations_fetch_failed", url=url, error=str(exc))
        raise _unavailable()


async def _load_countries() -> List[Dict[str, Any]]:
    if settings.locations_file:
        data = await _read_file(settings.locations_file)
    else:
        data = await _fetch(settings.locations_api_url)
    if not isinstance(data, list):
        logger.error("locations_unexpected_payload")
        raise _unavailable()
    return data


async def get_countries() -> List[Country]:
    return [Country.model_validate(c) for c in await _load_countries()]


async def get_states_by_country(country_id: int) -> List[State]:
    for country in await _load_countries():
        if country.get("id") == country_id:
            return [State.model_validate(s) for s in country.get("states") or []]
    raise NotFoundError(f"Country with ID {country_id} not found")


async def get_cities_by_state(state_id: int) -> List[City]:
    for country in await _load_countries():
        for state in country.get("states") or []:
            if state.get("id") == state_id:
                return [City.model_validate(c) for c in state.get("cities") or []]
    raise NotFoundError(f"State with ID {state_id} not found")
