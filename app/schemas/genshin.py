"""Schemas for the Genshin Impact account and its character roster."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel

GenshinElement = Literal["Pyro", "Hydro", "Anemo", "Electro", "Dendro", "Cryo", "Geo"]
GenshinWeapon = Literal["Sword", "Claymore", "Polearm", "Bow", "Catalyst"]
GenshinRarity = Literal[4, 5]


class GenshinAccountCreate(CamelModel):
    """Body for PUT /genshin (create or replace the account stats)."""

    uid: str = Field(..., min_length=1, max_length=32)
    adventure_rank: int = Field(default=1, ge=1, le=60)
    world_level: int = Field(default=0, ge=0, le=9)
    primogems: int = Field(default=0, ge=0)
    intertwined: int = Field(default=0, ge=0)
    acquaint: int = Field(default=0, ge=0)


class GenshinAccountUpdate(CamelModel):
    """Body for PATCH /genshin."""

    uid: str | None = Field(default=None, min_length=1, max_length=32)
    adventure_rank: int | None = Field(default=None, ge=1, le=60)
    world_level: int | None = Field(default=None, ge=0, le=9)
    primogems: int | None = Field(default=None, ge=0)
    intertwined: int | None = Field(default=None, ge=0)
    acquaint: int | None = Field(default=None, ge=0)


class CharacterCreate(CamelModel):
    """Body for POST /genshin/characters."""

    name: str = Field(..., min_length=1, max_length=100)
    element: GenshinElement
    weapon: GenshinWeapon
    rarity: GenshinRarity
    constellation: int = Field(default=0, ge=0, le=6)
    level: int = Field(default=1, ge=1, le=90)
    friendship: int = Field(default=0, ge=0, le=10)
    image: str = Field(..., min_length=1)
    obtained: bool = True
    tier: str | None = None
    type: str | None = None
    type2: str | None = None
    build_notes: str | None = None


class CharacterUpdate(CamelModel):
    """Body for PATCH /genshin/characters/{id}."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    element: GenshinElement | None = None
    weapon: GenshinWeapon | None = None
    rarity: GenshinRarity | None = None
    constellation: int | None = Field(default=None, ge=0, le=6)
    level: int | None = Field(default=None, ge=1, le=90)
    friendship: int | None = Field(default=None, ge=0, le=10)
    image: str | None = Field(default=None, min_length=1)
    obtained: bool | None = None
    tier: str | None = None
    type: str | None = None
    type2: str | None = None
    build_notes: str | None = None


class CharacterRead(CamelModel):
    id: str
    account_id: str
    name: str
    element: str
    weapon: str
    rarity: int
    constellation: int = 0
    level: int = 1
    friendship: int = 0
    image: str
    obtained: bool = True
    tier: str | None = None
    type: str | None = None
    type2: str | None = None
    build_notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class GenshinAccountRead(CamelModel):
    """Account stats plus every character on the account."""

    uid: str
    adventure_rank: int
    world_level: int
    primogems: int
    intertwined: int
    acquaint: int
    characters: list[CharacterRead] = Field(default_factory=list)
