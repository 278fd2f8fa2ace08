from typing import Optional

from pydantic import BaseModel


class City(BaseModel):
    id: int
    name: str
    latitude: Optional[str] = None
    longitude: Optional[str] = None


class State(BaseModel):
    id: int
    name: str
    state_code: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None


class Country(BaseModel):
    id: int
    name: str
    iso2: Optional[str] = None
    iso3: Optional[str] = None
    phone_code: Optional[str] = None
    capital: Optional[str] = None
    currency: Optional[str] = None
    currency_symbol: Optional[str] = None
    region: Optional[str] = None
    subregion: Optional[str] = None
    native: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    emoji: Optional[str] = None
