from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
import bcrypt
from sqlalchemy import func
from sqlalchemy.orm import Session
from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from ..config import Settings
from ..core.database import get_db
from ..models import User
from ..exceptions import AuthenticationError
import logging

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"
PASSWORD_RESET_TOKEN_TYPE = "password_reset"

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login")
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login", auto_error=False)


def get_settings(request: Request) -> Settings:
    """Dependency for the settings the application was built with"""
    return request.app.state.settings


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a hash"""
    try:
        password_bytes = plain_password.encode('utf-8')[:BCRYPT_MAX_BYTES]
        if isinstance(hashed_password, str):
            hashed_password_bytes = hashed_password.encode('utf-8')
        else:
            hashed_password_bytes = hashed_password
        return bcrypt.checkpw(password_bytes, hashed_password_bytes)
    except ValueError as e:
        logger.error(f"Password verification failed: {e}")
        return False


def get_password_hash(password: str) -> str:
    """Hash a password using bcrypt"""
    password_bytes = password.encode('utf-8')[:BCRYPT_MAX_BYTES]
    salt = bcrypt.gensalt(rounds=12)
    hashed = bcrypt.hashpw(password_bytes, salt)
    return hashed.decode('utf-8')


def create_token(
    user_id: str,
    settings: Settings,
    token_type: str = ACCESS_TOKEN_TYPE,
    expires_delta: Optional[timedelta] = None
) -> str:
    """Create a signed JWT carrying the user id"""
    if expires_delta is None:
        expires_delta = timedelta(hours=settings.jwt_expiration_hours)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode = {"sub": user_id, "type": token_type, "exp": expire}
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
    logger.debug(f"Created {token_type} token for user: {user_id}")
    return encoded_jwt


def create_access_token(user_id: str, settings: Settings) -> str:
    """Create a session token with the configured expiry"""
    return create_token(user_id, settings, ACCESS_TOKEN_TYPE)


def create_password_reset_token(user_id: str, settings: Settings) -> str:
    """Create a short-lived password reset token"""
    return create_token(
        user_id,
        settings,
        PASSWORD_RESET_TOKEN_TYPE,
        expires_delta=timedelta(minutes=settings.password_reset_expiration_minutes)
    )


def decode_token(token: str, settings: Settings, expected_type: str = ACCESS_TOKEN_TYPE) -> str:
    """Verify signature, expiry and type of a token and return its user id

    Raises JWTError for any token that cannot be used for ``expected_type``.
    """
    payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    user_id = payload.get("sub")
    if user_id is None:
        raise JWTError("Token has no subject")
    if payload.get("type") != expected_type:
        raise JWTError(f"Expected a {expected_type} token")
    return user_id


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Get user by email, ignoring case"""
    return db.query(User).filter(func.lower(User.email) == email.lower()).first()


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """Authenticate a user"""
    user = get_user_by_email(db, email)
    if not user:
        logger.warning(f"Authentication failed: user not found - {email}")
        return None
    if not verify_password(password, user.hashed_password):
        logger.warning(f"Authentication failed: invalid password for {email}")
        return None
    logger.info(f"User authenticated successfully: {email}")
    return user


def _resolve_user(token: str, db: Session, settings: Settings) -> User:
    try:
        user_id = decode_token(token, settings)
    except JWTError as e:
        logger.warning(f"JWT decode error: {e}")
        raise AuthenticationError("Invalid token")

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        logger.warning(f"User not found for token: {user_id}")
        raise AuthenticationError("User not found")

    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
) -> User:
    """Get current authenticated user from JWT token"""
    return _resolve_user(token, db, settings)


def get_optional_user(
    token: Optional[str] = Depends(optional_oauth2_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
) -> Optional[User]:
    """Get the caller if a bearer token was sent, None for anonymous requests

    A token that is present but invalid is still rejected.
    """
    if not token:
        return None
    return _resolve_user(token, db, settings)
