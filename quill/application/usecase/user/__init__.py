"""User use cases."""

from .common import UserItem
from .create_user import CreateUserRequest, CreateUserResponse, CreateUserUseCase
from .delete_user import DeleteUserRequest, DeleteUserResponse, DeleteUserUseCase
from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from .update_user_profile import (
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)

__all__ = [
    "CreateUserRequest",
    "CreateUserResponse",
    "CreateUserUseCase",
    "DeleteUserRequest",
    "DeleteUserResponse",
    "DeleteUserUseCase",
    "GetUserProfileRequest",
    "GetUserProfileResponse",
    "GetUserProfileUseCase",
    "UpdateUserProfileRequest",
    "UpdateUserProfileResponse",
    "UpdateUserProfileUseCase",
    "UserItem",
]
