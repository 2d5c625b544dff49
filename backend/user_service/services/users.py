"""
User service for registration, email lookup and login.
"""
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError

from user_service.core.errors import (
    EmailAlreadyInUseError,
    InvalidCredentialsError,
    RegistrationValidationError,
    StoreError,
    UserServiceError,
)
from user_service.models.user import User
from user_service.schemas.user import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from user_service.validation import validate_registration

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """
    Log and convert store failures into StoreError.

    Covers driver errors as well as encoding failures raised before a
    query reaches the server (e.g. lone surrogates in a string).
    """
    try:
        yield
    except UserServiceError:
        raise
    except Exception as e:
        logger.error("Server error during %s: %s", operation, e, exc_info=True)
        raise StoreError(e) from e


class UserService:
    """Service for user account operations."""

    def __init__(self, users_collection: AsyncIOMotorCollection):
        self.users_collection = users_collection

    async def email_exists(self, email: Optional[str]) -> bool:
        """
        Check whether a user with exactly this email exists.

        The comparison is exact: no case folding or trimming.

        Raises:
            StoreError: If the lookup fails
        """
        with store_errors("email lookup"):
            existing = await self.users_collection.find_one(
                {"email": email}, projection={"_id": 1}
            )
        return existing is not None

    async def register_user(self, request: RegisterRequest) -> RegisterResponse:
        """
        Register a new user.

        Args:
            request: Registration request with nome, email and senha

        Returns:
            RegisterResponse with the confirmation message

        Raises:
            RegistrationValidationError: If any field is invalid
            EmailAlreadyInUseError: If the email is taken
            StoreError: If the store fails
        """
        violations = validate_registration(request.nome, request.email, request.senha)
        if violations:
            raise RegistrationValidationError(violations)

        if await self.email_exists(request.email):
            raise EmailAlreadyInUseError()

        user = User(nome=request.nome, email=request.email, senha=request.senha)

        with store_errors("registration"):
            try:
                await self.users_collection.insert_one(user.to_document())
            except DuplicateKeyError:
                # Lost a race with a concurrent registration for the same email.
                logger.info("Concurrent registration rejected for %s", request.email)
                raise EmailAlreadyInUseError()

        logger.info("Registered user %s", request.email)
        return RegisterResponse()

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Authenticate a user by email and password.

        Raises:
            InvalidCredentialsError: If no user matches both fields
            StoreError: If the lookup fails
        """
        with store_errors("login"):
            user_doc = await self.users_collection.find_one(
                {"email": request.email, "senha": request.senha},
                projection={"_id": 1},
            )

        if user_doc is None:
            raise InvalidCredentialsError()

        return LoginResponse()
