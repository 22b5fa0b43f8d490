"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, Response, status
from pydantic import BaseModel, Field

from quill.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    LogoutRequest,
    LogoutUseCase,
)
from quill.application.usecase.user import (
    CreateUserRequest,
    CreateUserResponse,
    CreateUserUseCase,
    DeleteUserRequest,
    DeleteUserResponse,
    DeleteUserUseCase,
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)
from quill.config import Settings

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)

SESSION_COOKIE = "session"


class CreateUserAPIRequest(BaseModel):
    """API request for creating an account."""

    user_id: str = Field(min_length=1, max_length=255)
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(max_length=255)
    password: str = Field(repr=False)
    group: str | None = None


class UpdateUserProfileAPIRequest(BaseModel):
    """API request for updating a profile."""

    name: str = Field(min_length=1, max_length=255)
    email: str = Field(max_length=255)


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    user_id: str
    password: str = Field(repr=False)


def set_session_cookie(response: Response, session_id: str, settings: Settings) -> None:
    """Attach the session cookie for a freshly opened session."""
    response.set_cookie(
        key=SESSION_COOKIE,
        value=session_id,
        max_age=settings.sessions.lifetime_days * 24 * 60 * 60,
        domain=settings.cookie.domain,
        secure=settings.cookie.secure,
        httponly=True,
        samesite="lax",
    )


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    session: str | None = Cookie(default=None),
) -> GetCurrentUserResponse:
    """Get the logged in user and their permissions.

    Raises:
        HTTPException: 401 if not logged in
    """
    user = await get_current_user_use_case.execute(
        GetCurrentUserRequest(session_id=session)
    )
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not logged in",
        )
    return user


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginAPIRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginResponse:
    """Log in with a username and password.

    Raises:
        InvalidCredentialsError: 401 if the credentials don't match
    """
    result = await login_use_case.execute(
        LoginRequest(user_id=request.user_id, password=request.password)
    )
    set_session_cookie(response, result.session_id, settings)
    return result


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    logout_use_case: FromDishka[LogoutUseCase],
    settings: FromDishka[Settings],
    session: str | None = Cookie(default=None),
) -> Response:
    """End the current session and clear the cookie."""
    await logout_use_case.execute(LogoutRequest(session_id=session))

    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(
        key=SESSION_COOKIE,
        domain=settings.cookie.domain,
        secure=settings.cookie.secure,
        httponly=True,
        samesite="lax",
    )
    return response


@router.post(
    "", response_model=CreateUserResponse, status_code=status.HTTP_201_CREATED
)
async def create_user(
    request: CreateUserAPIRequest,
    response: Response,
    create_user_use_case: FromDishka[CreateUserUseCase],
    settings: FromDishka[Settings],
    session: str | None = Cookie(default=None),
) -> CreateUserResponse:
    """Create an account.

    Anonymous signups are logged in and receive a session cookie.
    """
    result = await create_user_use_case.execute(
        CreateUserRequest(
            user_id=request.user_id,
            name=request.name,
            email=request.email,
            password=request.password,
            group=request.group,
            session_id=session,
        )
    )

    if result.session_id is not None:
        set_session_cookie(response, result.session_id, settings)
    return result


@router.get("/{user_id}", response_model=GetUserProfileResponse)
async def get_user_profile(
    user_id: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
    session: str | None = Cookie(default=None),
) -> GetUserProfileResponse:
    """Get a user's profile and the comments the requester may see."""
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(user_id=user_id, session_id=session)
    )


@router.patch("/{user_id}", response_model=UpdateUserProfileResponse)
async def update_user_profile(
    user_id: str,
    request: UpdateUserProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    session: str | None = Cookie(default=None),
) -> UpdateUserProfileResponse:
    """Edit a profile. Users edit themselves; others need edit_foreign_user."""
    return await update_user_profile_use_case.execute(
        UpdateUserProfileRequest(
            user_id=user_id,
            name=request.name,
            email=request.email,
            session_id=session,
        )
    )


@router.delete("/{user_id}", response_model=DeleteUserResponse)
async def delete_user(
    user_id: str,
    response: Response,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
    settings: FromDishka[Settings],
    purge_content: bool = Query(default=False),
    session: str | None = Cookie(default=None),
) -> DeleteUserResponse:
    """Delete an account.

    The user's comments stay in place under ``[deleted]``. With
    ``purge_content`` they are blanked and hidden as well.
    """
    result = await delete_user_use_case.execute(
        DeleteUserRequest(
            user_id=user_id, purge_content=purge_content, session_id=session
        )
    )

    if result.logged_out:
        response.delete_cookie(
            key=SESSION_COOKIE,
            domain=settings.cookie.domain,
            secure=settings.cookie.secure,
            httponly=True,
            samesite="lax",
        )
    return result
