"""Router factory for the plain owner-scoped collections (list/create/get/update/delete)."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from app.api.deps import UserDep, repository
from app.repositories.owned import OwnedRepository
from app.schemas.base import SuccessResponse


def reject_nulls(repo: OwnedRepository, data: dict[str, Any]) -> None:
    """400 when a PATCH body sets a NOT NULL column to null."""
    columns = repo.model.__table__.columns
    for key, value in data.items():
        if value is not None or key in repo.json_fields or key not in columns:
            continue
        if not columns[key].nullable:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"{to_camel(key)} cannot be null",
            )


def build_crud_router(
    *,
    repository_cls: type[OwnedRepository],
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    read_schema: type[BaseModel],
    label: str,
    omit_missing_columns: bool = False,
    router: APIRouter | None = None,
) -> APIRouter:
    """
    Routes for one collection. Every handler requires a session and scopes the
    accessor to the caller, so other users' ids answer 404 like missing ones.

    omit_missing_columns drops fields the database cannot store (schema drift)
    from responses instead of returning them as null. Pass `router` to append
    the routes after ones already declared on it.
    """
    if router is None:
        router = APIRouter()
    RepoDep = Annotated[OwnedRepository, Depends(repository(repository_cls))]
    not_found = f"{label} not found"

    @router.get(
        "",
        response_model=list[read_schema],
        response_model_exclude_unset=omit_missing_columns,
    )
    def list_items(user: UserDep, repo: RepoDep) -> list[dict[str, Any]]:
        return repo.list_for_owner(user.id)

    @router.post(
        "",
        response_model=read_schema,
        status_code=status.HTTP_201_CREATED,
        response_model_exclude_unset=omit_missing_columns,
    )
    def create_item(body: create_schema, user: UserDep, repo: RepoDep) -> dict[str, Any]:
        return repo.create(user.id, body.model_dump())

    @router.get(
        "/{item_id}",
        response_model=read_schema,
        response_model_exclude_unset=omit_missing_columns,
    )
    def get_item(item_id: str, user: UserDep, repo: RepoDep) -> dict[str, Any]:
        item = repo.get(item_id, user.id)
        if item is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return item

    @router.patch(
        "/{item_id}",
        response_model=read_schema,
        response_model_exclude_unset=omit_missing_columns,
    )
    def update_item(
        item_id: str, body: update_schema, user: UserDep, repo: RepoDep
    ) -> dict[str, Any]:
        data = body.model_dump(exclude_unset=True)
        reject_nulls(repo, data)
        item = repo.update(item_id, user.id, data)
        if item is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return item

    @router.delete("/{item_id}", response_model=SuccessResponse)
    def delete_item(item_id: str, user: UserDep, repo: RepoDep) -> SuccessResponse:
        if not repo.delete(item_id, user.id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return SuccessResponse()

    return router
