from datetime import datetime, timedelta
from typing import Optional
import logging
import secrets
import string
from jose import JWTError, jwt
import bcrypt
from app.core.config import settings

logger = logging.getLogger(__name__)

# Bcrypt configuration - using 12 rounds for better security (default is 10)
BCRYPT_ROUNDS = 12

TEMP_PASSWORD_ALPHABET = string.ascii_letters + string.digits

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a bcrypt hash.
    """
    try:
        if isinstance(hashed_password, bytes):
            hash_bytes = hashed_password
        else:
            hash_bytes = hashed_password.encode('utf-8')
        return bcrypt.checkpw(plain_password.encode('utf-8'), hash_bytes)
    except ValueError as e:
        logger.warning(f"[SECURITY] Password verification error: {e}")
        return False

def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.
    Returns the hash as a string for database storage.
    """
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
    return hashed.decode('utf-8')

def generate_temp_password() -> str:
    """Single-use temporary credential, e.g. HT-a8Kd02Qz!"""
    body = "".join(secrets.choice(TEMP_PASSWORD_ALPHABET) for _ in range(settings.TEMP_PASSWORD_LENGTH))
    return f"{settings.TEMP_PASSWORD_PREFIX}{body}{settings.TEMP_PASSWORD_SUFFIX}"

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token"""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)

def decode_access_token(token: str) -> Optional[dict]:
    """Decode JWT access token, None when invalid or expired"""
    try:
        return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        logger.info(f"[SECURITY] Token decode failed: {e}")
        return None
