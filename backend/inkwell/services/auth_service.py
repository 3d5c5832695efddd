from datetime import timedelta
from jose import JWTError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ..repositories import UserRepository, PasswordResetRepository
from ..core.security import (
    PASSWORD_RESET_TOKEN_TYPE,
    get_password_hash,
    authenticate_user,
    create_access_token,
    create_password_reset_token,
    decode_token,
)
from ..core.events import EventBus, PasswordResetRequestedEvent
from ..config import Settings
from ..models import User
from ..schemas import UserRegister, UserLogin, AuthResponse, User as UserSchema
from ..exceptions import ConflictError, AuthenticationError, InvalidTokenError
from ..utils import get_current_timestamp
import logging

logger = logging.getLogger(__name__)

FORGOT_PASSWORD_MESSAGE = "If an account exists, a password reset email has been sent"


class AuthService:
    """Service for authentication operations"""

    def __init__(self, db: Session, settings: Settings, event_bus: EventBus):
        self.user_repo = UserRepository(db)
        self.reset_repo = PasswordResetRepository(db)
        self.settings = settings
        self.event_bus = event_bus
        self.db = db

    def _auth_response(self, user: User) -> AuthResponse:
        token = create_access_token(user.id, self.settings)
        return AuthResponse(user=UserSchema.model_validate(user), token=token)

    def register(self, user_data: UserRegister) -> AuthResponse:
        """Register a new user"""
        logger.info(f"Attempting to register user: {user_data.email}")

        try:
            existing_user = self.user_repo.get_by_email(user_data.email)
            if existing_user:
                logger.warning(f"Registration failed: email already exists - {user_data.email}")
                raise ConflictError("User already exists")

            try:
                new_user = self.user_repo.create(
                    email=user_data.email.lower(),
                    hashed_password=get_password_hash(user_data.password),
                    first_name=user_data.first_name,
                    last_name=user_data.last_name
                )
                self.user_repo.commit()
            except IntegrityError:
                # Another request registered the same email after the lookup above
                logger.warning(f"Registration failed: email already exists - {user_data.email}")
                raise ConflictError("User already exists")

            logger.info(f"User registered successfully: {new_user.email}")
            return self._auth_response(new_user)
        except Exception as e:
            logger.error(f"Error registering user: {e}")
            self.user_repo.rollback()
            raise

    def login(self, user_data: UserLogin) -> AuthResponse:
        """Login user and return a session token"""
        logger.info(f"Attempting login for: {user_data.email}")

        user = authenticate_user(self.db, user_data.email, user_data.password)
        if not user:
            logger.warning(f"Login failed for: {user_data.email}")
            # Same message for unknown email and wrong password
            raise AuthenticationError("Invalid credentials")

        try:
            user.last_login = get_current_timestamp()
            self.user_repo.commit()
        except Exception as e:
            logger.error(f"Error recording login: {e}")
            self.user_repo.rollback()
            raise

        logger.info(f"User logged in successfully: {user.email}")
        return self._auth_response(user)

    def forgot_password(self, email: str) -> str:
        """Issue a reset token if the account exists; the reply never says whether it does"""
        logger.info("Password reset requested")

        user = self.user_repo.get_by_email(email)
        if not user:
            logger.info(f"Password reset requested for unknown email: {email}")
            return FORGOT_PASSWORD_MESSAGE

        try:
            token = create_password_reset_token(user.id, self.settings)
            self.reset_repo.create(
                user_id=user.id,
                token=token,
                expires_at=get_current_timestamp() + timedelta(minutes=self.settings.password_reset_expiration_minutes)
            )
            self.reset_repo.commit()
        except Exception as e:
            logger.error(f"Error storing password reset token: {e}")
            self.reset_repo.rollback()
            raise

        self.event_bus.publish(PasswordResetRequestedEvent(
            user_id=user.id,
            email=user.email,
            first_name=user.first_name,
            token=token
        ))
        return FORGOT_PASSWORD_MESSAGE

    def reset_password(self, token: str, password: str) -> None:
        """Consume a reset token and replace the user's password"""
        try:
            user_id = decode_token(token, self.settings, expected_type=PASSWORD_RESET_TOKEN_TYPE)
        except JWTError as e:
            logger.warning(f"Password reset rejected: {e}")
            raise InvalidTokenError()

        try:
            reset_request = self.reset_repo.get_active(token, user_id, get_current_timestamp())
            if not reset_request:
                logger.warning(f"Password reset rejected: no active request for user {user_id}")
                raise InvalidTokenError()

            user = self.user_repo.get(user_id)
            if not user:
                raise InvalidTokenError()

            user.hashed_password = get_password_hash(password)
            self.reset_repo.delete_by_token(token)
            self.user_repo.commit()
            logger.info(f"Password reset successful for user {user_id}")
        except Exception as e:
            logger.error(f"Error resetting password: {e}")
            self.user_repo.rollback()
            raise
