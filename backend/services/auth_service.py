"""
Auth Service

Registration, login and token-to-user resolution.
"""

from typing import Tuple
from sqlalchemy.orm import Session
import logging

from constants import AuthConfig, ProviderType
from dtos.request import RegisterRequest, LoginRequest
from exceptions import AuthenticationError, ConflictError, ValidationError
from models import User
from repositories.user_repository import UserRepository
from services.transaction import unit_of_work
from utils.logging_utils import log_operation
from utils.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    """Service for CMS user accounts."""

    def __init__(self, db: Session):
        """
        Initialize AuthService.

        Args:
            db: Database session
        """
        self.db = db
        self.user_repo = UserRepository(db)

    @log_operation("register_user")
    def register(self, request: RegisterRequest) -> User:
        """
        Create an account with a bcrypt-hashed password.

        Raises:
            ConflictError: If the email is already registered
        """
        if self.user_repo.get_by_email(request.email):
            raise ConflictError(f"Email '{request.email}' is already registered", field="email")

        user = User(
            email=request.email,
            password=hash_password(request.password),
            provider=ProviderType.NORMAL.value,
        )
        with unit_of_work(self.db, "register_user", f"Email '{request.email}' is already registered"):
            self.user_repo.create(user)

        self.db.refresh(user)
        logger.info(f"Registered user {user.id}")
        return user

    def login(self, request: LoginRequest) -> Tuple[str, User]:
        """
        Check credentials and issue an access token.

        Unknown email and wrong password produce the same error so the
        response does not reveal which accounts exist.

        Returns:
            Tuple of (token, user)

        Raises:
            ValidationError: If email or password is missing
            AuthenticationError: If the credentials do not match
        """
        email = request.email.strip().lower()
        if not email or not request.password:
            raise ValidationError("Email and password are required")

        user = self.user_repo.get_by_email(email)
        if not user or not self._password_matches(request.password, user.password):
            logger.info("Rejected login attempt")
            raise AuthenticationError(AuthConfig.INVALID_CREDENTIALS_MESSAGE)

        token = create_access_token(user.id)
        logger.info(f"User {user.id} logged in")
        return token, user

    def get_user(self, user_id: str) -> User:
        """
        Resolve the user behind a valid token.

        Raises:
            AuthenticationError: If the account no longer exists
        """
        user = self.user_repo.get_by_id(user_id)
        if not user:
            raise AuthenticationError("Invalid token")
        return user

    @staticmethod
    def _password_matches(plain: str, hashed: str) -> bool:
        try:
            return verify_password(plain, hashed)
        except ValueError:
            # Stored value is not a recognisable hash
            logger.warning("Stored password hash could not be verified")
            return False
