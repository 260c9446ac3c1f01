# ============================================================================
# FILE: ytclone/core/security.py
# Password hashing and stateless session tokens
# ============================================================================
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional
from werkzeug.security import generate_password_hash, check_password_hash
from ytclone.config import Settings, settings, DEFAULT_JWT_SECRET
import jwt
import logging

logger = logging.getLogger(__name__)

TOKEN_CLAIMS = ("id", "username", "email")


@dataclass
class TokenVerification:
    """Outcome of verifying a session token: claims on success, a reason otherwise"""
    valid: bool
    claims: Dict = field(default_factory=dict)
    reason: Optional[str] = None


def get_password_hash(password: str) -> str:
    """Salted one-way hash of a password"""
    return generate_password_hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Constant-time check of a password against its stored hash"""
    if not hashed_password:
        return False
    return check_password_hash(hashed_password, plain_password)


def create_access_token(
    data: Dict,
    expires_delta: Optional[timedelta] = None,
    app_settings: Optional[Settings] = None,
) -> str:
    """
    Sign the user identity claims into a JWT

    Args:
        data: mapping holding at least id, username and email
        expires_delta: lifetime, defaults to ACCESS_TOKEN_EXPIRE_HOURS
        app_settings: settings holding the signing key, defaults to the process settings

    Returns:
        Encoded token string
    """
    if app_settings is None:
        app_settings = settings
    if expires_delta is None:
        expires_delta = timedelta(hours=app_settings.ACCESS_TOKEN_EXPIRE_HOURS)

    now = datetime.now(timezone.utc)
    payload = {key: data.get(key) for key in TOKEN_CLAIMS}
    payload.update({"iat": now, "exp": now + expires_delta})

    return jwt.encode(payload, app_settings.JWT_SECRET, algorithm=app_settings.JWT_ALGORITHM)


def verify_access_token(token: str, app_settings: Optional[Settings] = None) -> TokenVerification:
    """Validate signature and expiry; no revocation list is consulted"""
    if app_settings is None:
        app_settings = settings
    try:
        payload = jwt.decode(
            token,
            app_settings.JWT_SECRET,
            algorithms=[app_settings.JWT_ALGORITHM],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError:
        return TokenVerification(valid=False, reason="expired")
    except jwt.InvalidTokenError as e:
        logger.debug(f"Rejected token: {e}")
        return TokenVerification(valid=False, reason="invalid")

    if payload.get("id") is None:
        return TokenVerification(valid=False, reason="invalid")

    claims = {key: payload.get(key) for key in TOKEN_CLAIMS}
    return TokenVerification(valid=True, claims=claims)


def check_signing_key(app_settings: Optional[Settings] = None):
    """Refuse to start a production process with the development signing key"""
    if app_settings is None:
        app_settings = settings
    if not app_settings.JWT_SECRET:
        logger.critical("JWT_SECRET is not set")
        raise RuntimeError("JWT_SECRET is not set")
    if app_settings.is_production and app_settings.JWT_SECRET == DEFAULT_JWT_SECRET:
        logger.critical("JWT_SECRET must be configured in production")
        raise RuntimeError("JWT_SECRET must be configured in production")
    if app_settings.JWT_SECRET == DEFAULT_JWT_SECRET:
        logger.warning("Using the default JWT secret; set JWT_SECRET outside local development")
