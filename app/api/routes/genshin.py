"""Genshin Impact account (one per user) and its character roster."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic.alias_generators import to_camel

from app.api.deps import DbDep, UserDep, repository
from app.api.routes.crud import reject_nulls
from app.models import GenshinAccount
from app.repositories import GenshinAccountRepository, GenshinCharacterRepository
from app.repositories.genshin import ACCOUNT_FIELDS
from app.schemas.base import SuccessResponse
from app.schemas.genshin import (
    CharacterCreate,
    CharacterRead,
    CharacterUpdate,
    GenshinAccountCreate,
    GenshinAccountRead,
    GenshinAccountUpdate,
)

router = APIRouter()

CharactersDep = Annotated[
    GenshinCharacterRepository, Depends(repository(GenshinCharacterRepository))
]


def _account_view(account: GenshinAccount, characters: list[dict[str, Any]]) -> GenshinAccountRead:
    values = {name: getattr(account, name) for name in ACCOUNT_FIELDS}
    return GenshinAccountRead.model_validate({**values, "characters": characters})


@router.get("", response_model=GenshinAccountRead | None)
def get_account(user: UserDep, db: DbDep, characters: CharactersDep) -> GenshinAccountRead | None:
    """The caller's account with its characters, or null if they have not set one up."""
    account = GenshinAccountRepository(db).get_for_owner(user.id)
    if account is None:
        return None
    return _account_view(account, characters.list_for_owner(user.id))


@router.put("", response_model=GenshinAccountRead)
def put_account(
    body: GenshinAccountCreate, user: UserDep, db: DbDep, characters: CharactersDep
) -> GenshinAccountRead:
    account = GenshinAccountRepository(db).upsert(user.id, body.model_dump())
    return _account_view(account, characters.list_for_owner(user.id))


@router.patch("", response_model=GenshinAccountRead)
def patch_account(
    body: GenshinAccountUpdate, user: UserDep, db: DbDep, characters: CharactersDep
) -> GenshinAccountRead:
    data = body.model_dump(exclude_unset=True)
    nulls = [key for key, value in data.items() if value is None]
    if nulls:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{to_camel(nulls[0])} cannot be null",
        )
    account = GenshinAccountRepository(db).update(user.id, data)
    if account is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Account not found")
    return _account_view(account, characters.list_for_owner(user.id))


@router.post(
    "/characters",
    response_model=CharacterRead,
    status_code=status.HTTP_201_CREATED,
)
def add_character(body: CharacterCreate, user: UserDep, characters: CharactersDep) -> dict[str, Any]:
    """Add a character to the caller's account; 404 until the account exists."""
    try:
        return characters.create(user.id, body.model_dump())
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Account not found")


@router.patch("/characters/{character_id}", response_model=CharacterRead)
def update_character(
    character_id: str, body: CharacterUpdate, user: UserDep, characters: CharactersDep
) -> dict[str, Any]:
    data = body.model_dump(exclude_unset=True)
    reject_nulls(characters, data)
    character = characters.update(character_id, user.id, data)
    if character is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Character not found")
    return character


@router.delete("/characters/{character_id}", response_model=SuccessResponse)
def delete_character(character_id: str, user: UserDep, characters: CharactersDep) -> SuccessResponse:
    if not characters.delete(character_id, user.id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Character not found")
    return SuccessResponse()
