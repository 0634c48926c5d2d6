"""User CRUD routes. Thin mapping from HTTP verbs onto UserService."""

from fastapi import APIRouter, Request, Response
from pydantic import BaseModel

from services.users import UserService

router = APIRouter(prefix="/users", tags=["users"])


class UserIn(BaseModel):
    name: str
    address: str


def _service(request: Request) -> UserService:
    return request.app.state.user_service


@router.get("")
def list_users(request: Request) -> list[dict]:
    """All users in creation order."""
    return [user.to_dict() for user in _service(request).list_users()]


@router.get("/{user_id}")
def get_user(user_id: int, request: Request) -> dict:
    return _service(request).get_user(user_id).to_dict()


@router.post("", status_code=201)
def create_user(body: UserIn, request: Request) -> dict:
    user = _service(request).create_user(body.name, body.address)
    return user.to_dict()


@router.put("/{user_id}")
def update_user(user_id: int, body: UserIn, request: Request) -> dict:
    user = _service(request).update_user(user_id, body.name, body.address)
    return user.to_dict()


@router.delete("/{user_id}", status_code=204)
def delete_user(user_id: int, request: Request) -> Response:
    _service(request).delete_user(user_id)
    return Response(status_code=204)
