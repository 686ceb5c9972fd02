import hashlib
from typing import Optional, Annotated

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from database.db import get_db
from models.users import User as UserModel
from models.study import UserStudyConfig as UserStudyConfigModel
from schemas.users import UserContext

AuthHeader = Annotated[Optional[str], Header(alias="Authorization")]


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=401, detail=detail, headers={"WWW-Authenticate": "Bearer"})


def get_user_context(authorization: AuthHeader = None, db: Session = Depends(get_db)) -> UserContext:
    if not authorization:
        raise _unauthorized("Missing Authorization header")

    # "Bearer <token>"
    try:
        scheme, token = authorization.split(" ", 1)
    except ValueError:
        raise _unauthorized("Invalid Authorization header format")

    if scheme.lower() != "bearer" or not token.strip():
        raise _unauthorized("Invalid auth scheme")

    # only the hash is stored, lookup by hash keeps the comparison off the raw token
    user = db.query(UserModel).filter(UserModel.token_hash == hash_token(token.strip())).first()
    if user is None:
        raise _unauthorized("Invalid token")

    config = db.query(UserStudyConfigModel).filter(UserStudyConfigModel.user_id == user.id).first()
    return UserContext(
        user_id=user.id,
        email=user.email,
        study_cycle_id=config.study_cycle_id if config else None,
        rotation=config.rotation if config else None,
    )


def require_profile(user: UserContext = Depends(get_user_context)) -> UserContext:
    if not user.profile_complete:
        raise HTTPException(status_code=403, detail="Study profile not completed")
    return user
