"""
User endpoints for API v1.

Expose create, list, retrieve, update and delete over the user
collection.  Handlers are synchronous so FastAPI runs them in its
threadpool; ``UserStore`` serialises them with its own lock.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from user_store_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from user_store_api.app.services.user_service import (
    PersistenceError,
    UserNotFoundError,
    UserStore,
    get_user_store,
)

router = APIRouter()

NOT_FOUND_DETAIL = "User not found"
SAVE_FAILED_DETAIL = "Failed to save user"


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_user(user: UserCreate, store: UserStore = Depends(get_user_store)) -> UserRead:
    """Create a user and return it with its assigned identifier.

    Any ``id`` in the body is ignored.  A failed snapshot write yields
    HTTP 500 even though the user has been added in memory.
    """
    try:
        return store.create(user)
    except PersistenceError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=SAVE_FAILED_DETAIL)


@router.get("", response_model=List[UserRead])
@router.get("/", response_model=List[UserRead], include_in_schema=False)
def list_users(store: UserStore = Depends(get_user_store)) -> List[UserRead]:
    """Return all users in insertion order."""
    return store.list()


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: str, store: UserStore = Depends(get_user_store)) -> UserRead:
    """Retrieve a single user.  Returns HTTP 404 if it does not exist."""
    try:
        return store.get(user_id)
    except UserNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: str,
    user: UserUpdate,
    store: UserStore = Depends(get_user_store),
) -> UserRead:
    """Replace the name and e‑mail of a user; the identifier is kept."""
    try:
        return store.update(user_id, user)
    except UserNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)
    except PersistenceError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=SAVE_FAILED_DETAIL)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: str, store: UserStore = Depends(get_user_store)) -> Response:
    """Delete a user by ID."""
    try:
        store.delete(user_id)
    except UserNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)
    except PersistenceError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=SAVE_FAILED_DETAIL)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
