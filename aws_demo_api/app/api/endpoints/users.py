"""
User endpoints.

CRUD over the ``users`` table.  Handlers are plain functions so that
FastAPI runs the blocking SQLite calls in its worker threadpool.  A
missing user is reported by raising ``UserNotFoundError``, which the
application turns into an empty 404 response.  Ids must be positive
64‑bit integers; anything else fails validation with 400.
"""

from typing import Annotated, List

from fastapi import APIRouter, Path, Response, status

from ...core.exceptions import UserNotFoundError
from ...schemas.user import User, UserCreate, UserRead
from ..dependencies import UserRepositoryDep

router = APIRouter()

UserId = Annotated[int, Path(gt=0, le=2**63 - 1, description="Identifier assigned by the store")]


def _to_read(user: User) -> UserRead:
    return UserRead.model_validate(user.model_dump())


@router.get("", response_model=List[UserRead])
def list_users(repository: UserRepositoryDep) -> List[UserRead]:
    """Return every stored user; an empty store yields ``[]``."""
    return [_to_read(user) for user in repository.find_all()]


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: UserId, repository: UserRepositoryDep) -> UserRead:
    user = repository.find_by_id(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return _to_read(user)


@router.post("", response_model=UserRead, status_code=status.HTTP_200_OK)
def create_user(user_in: UserCreate, repository: UserRepositoryDep) -> UserRead:
    """Store a new user and return it with its assigned id."""
    user = repository.save(User(name=user_in.name, email=user_in.email))
    return _to_read(user)


@router.put("/{user_id}", response_model=UserRead)
def update_user(user_id: UserId, user_in: UserCreate, repository: UserRepositoryDep) -> UserRead:
    """Replace ``name`` and ``email`` of an existing user."""
    if not repository.exists_by_id(user_id):
        raise UserNotFoundError(user_id)
    # save() raises UserNotFoundError itself if the row vanished meanwhile.
    user = repository.save(User(id=user_id, name=user_in.name, email=user_in.email))
    return _to_read(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: UserId, repository: UserRepositoryDep) -> Response:
    if not repository.delete_by_id(user_id):
        raise UserNotFoundError(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
