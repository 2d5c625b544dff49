"""
User router for email lookup, registration and login.
"""
from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorCollection

from user_service.database.connections import get_users_collection
from user_service.schemas.user import (
    EmailCheckRequest,
    EmailCheckResponse,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    ValidationErrorResponse,
)
from user_service.services.users import UserService

router = APIRouter(tags=["Users"])


def get_user_service(
    users_collection: AsyncIOMotorCollection = Depends(get_users_collection),
) -> UserService:
    """Dependency to get UserService instance."""
    return UserService(users_collection)


@router.post(
    "/verificar-email",
    response_model=EmailCheckResponse,
    status_code=status.HTTP_200_OK,
    summary="Check whether an email is registered",
    responses={500: {"model": ErrorResponse}},
)
async def check_email(
    body: EmailCheckRequest,
    user_service: UserService = Depends(get_user_service),
):
    """
    Report whether a user already uses this email.

    The email format is not validated here; any string is looked up as-is.
    """
    exists = await user_service.email_exists(body.email)
    return EmailCheckResponse(emailExists=exists)


@router.post(
    "/cadastro",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        400: {
            "model": ValidationErrorResponse,
            "description": "Invalid fields, or `{error}` when the email is already in use",
        },
        500: {"model": ErrorResponse},
    },
)
async def register(
    body: RegisterRequest,
    user_service: UserService = Depends(get_user_service),
):
    """
    Register a new user account.

    - **nome**: Required, non-empty
    - **email**: Valid email address (must be unique)
    - **senha**: Password (minimum 6 characters)
    """
    return await user_service.register_user(body)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Check email and password",
    responses={
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def login(
    body: LoginRequest,
    user_service: UserService = Depends(get_user_service),
):
    """
    Authenticate with email and password.

    Failures always return the same message, whichever field was wrong.
    """
    return await user_service.login(body)
