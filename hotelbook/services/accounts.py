import logging
from sqlalchemy.orm import Session

from ..errors import Unauthenticated
from ..models import User
from ..security import hash_password, verify_password, dummy_verify, issue_token

logger = logging.getLogger(__name__)


def create_user(db: Session, email: str, password: str) -> User:
    """Registers a user with a bcrypt hash of ``password``. Not exposed over HTTP."""
    user = User(email=email, hashed_password=hash_password(password))
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("User created: %s (id=%s)", email, user.id)
    return user


def login(db: Session, email: str, password: str) -> str:
    """
    Checks the credentials and returns a freshly signed token.
    Unknown email and wrong password raise the same error.
    """
    logger.info("Login attempt for email: %s", email)
    user = db.query(User).filter(User.email == email).first()
    if not user:
        dummy_verify()
        logger.info("Login failed for %s: user not found", email)
        raise Unauthenticated()
    if not verify_password(password, user.hashed_password):
        logger.info("Login failed for %s: password does not match", email)
        raise Unauthenticated()
    token = issue_token(user.id)
    logger.info("User logged in: %s, user id %s, token issued", email, user.id)
    return token
