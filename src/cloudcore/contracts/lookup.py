"""Lookup-style service contracts: addresses, short links and feature flags."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field


class Address(BaseModel):
    display_address: str = ""
    address_line1: str = ""
    formatted_address: list[str] = Field(default_factory=list)
    thoroughfare: str = ""
    building_number: str = ""
    building_name: str = ""
    sub_building_number: str = ""
    sub_building_name: str = ""
    line1: str = ""
    line2: str = ""
    line3: str = ""
    line4: str = ""
    locality: str = ""
    town_or_city: str = ""
    county: str = ""
    district: str = ""
    country: str = ""


class AddressResult(BaseModel):
    postcode: str
    house_number: str | None = None
    latitude: float = 0.0
    longitude: float = 0.0
    address_found: bool = False
    address_count: int = 0
    addresses: list[Address] = Field(default_factory=list)


class UrlShortenResult(BaseModel):
    source_link: str
    short_link: str | None = None
    success: bool = False
    message: str | None = None


@runtime_checkable
class AddressLookup(Protocol):
    async def search_address(
        self, post_code: str, house_no: str | None = None
    ) -> AddressResult: ...


@runtime_checkable
class UrlShortener(Protocol):
    async def shorten_link(self, original: str) -> UrlShortenResult: ...


@runtime_checkable
class FeatureFlag(Protocol):
    def get_feature_flag(self, key: str, default_value: bool = False) -> bool: ...
