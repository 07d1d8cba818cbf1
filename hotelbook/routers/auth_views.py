import logging
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..config import settings
from ..db import get_db
from ..limiter import limiter
from ..security import get_current_user_id
from ..services import accounts

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

# ==== Schemas ====

class LoginIn(BaseModel):
    email: str
    password: str

class TokenOut(BaseModel):
    token: str

class SessionOut(BaseModel):
    loggedIn: bool

class MessageOut(BaseModel):
    message: str

# ==== Endpoints ====

@router.get("/check-session", response_model=SessionOut)
@limiter.exempt
def check_session(request: Request):
    user_id = get_current_user_id(request)
    if not user_id:
        logger.debug("No valid token, user not logged in")
        return {"loggedIn": False}
    logger.debug("Session active for user id %s", user_id)
    return {"loggedIn": True}


@router.post("/login", response_model=TokenOut)
@limiter.limit(settings.RATE_LIMIT_AUTH)
def login(request: Request, payload: LoginIn, db: Session = Depends(get_db)):
    token = accounts.login(db, payload.email, payload.password)
    return {"token": token}


@router.post("/logout", response_model=MessageOut)
def logout():
    # Tokens are not tracked server side; clients drop theirs
    logger.info("Logout request received")
    return {"message": "Logged out successfully"}
