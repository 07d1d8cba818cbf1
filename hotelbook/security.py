import logging
from typing import Optional
from passlib.context import CryptContext
from passlib.exc import PasswordSizeError
from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired
from fastapi import Request, Depends
from sqlalchemy.orm import Session

from .config import settings
from .db import get_db
from .errors import Unauthorized
from .models import User

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
serializer = URLSafeTimedSerializer(settings.SECRET_KEY, salt="hotelbook-token")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    try:
        return pwd_context.verify(password, hashed)
    except PasswordSizeError:
        return False


def dummy_verify():
    """Spend the same bcrypt time as a real check when there is no hash to check against."""
    pwd_context.dummy_verify()


def issue_token(user_id: int) -> str:
    return serializer.dumps({"uid": user_id})


def read_token(token: str | None, max_age: int | None = None) -> Optional[int]:
    """
    Return the user id carried by ``token``, or None when the token is
    missing, tampered with or older than ``max_age`` seconds.
    """
    if not token or token == "null":
        return None
    if max_age is None:
        max_age = settings.TOKEN_MAX_AGE_SECONDS
    try:
        data = serializer.loads(token, max_age=max_age)
        return int(data.get("uid"))
    except SignatureExpired:
        logger.debug("Token expired")
        return None
    except (BadSignature, ValueError, TypeError, AttributeError):
        return None


def bearer_token(request: Request) -> Optional[str]:
    header = request.headers.get("Authorization")
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def get_current_user_id(request: Request) -> Optional[int]:
    return read_token(bearer_token(request))


def require_user_id(request: Request, db: Session = Depends(get_db)) -> int:
    """
    Dependency for protected routes. Resolves the bearer token to the id of
    an existing user or fails with 401.
    """
    user_id = get_current_user_id(request)
    if not user_id:
        logger.info("Rejected %s %s: missing or invalid token", request.method, request.url.path)
        raise Unauthorized()

    if db.get(User, user_id) is None:
        # Token outlived its user
        logger.info("Rejected %s %s: unknown user id %s", request.method, request.url.path, user_id)
        raise Unauthorized()

    return user_id
