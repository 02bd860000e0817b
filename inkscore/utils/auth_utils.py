# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from typing import Optional
from fastapi import Depends, HTTPException, Header
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from inkscore.models.database import get_db
from inkscore.models.user import User
from inkscore.utils.jwt_utils import verify_access_token

logger = logging.getLogger(__name__)


# ✅ Dependency to extract token payload
def require_token(authorization: Optional[str] = Header(None)):
    if not authorization:
        raise HTTPException(status_code=401, detail="No authorization header provided")
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization format")
    token = authorization.replace("Bearer ", "")
    return verify_access_token(token)


# ✅ Dependency resolving (and provisioning) the caller's User row
def get_current_user(
    token_data: dict = Depends(require_token),
    db: Session = Depends(get_db)
) -> User:
    user_id = token_data.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Token has no subject")

    user = db.query(User).filter(User.id == str(user_id)).first()
    if user:
        return user

    # First authenticated request: the auth provider already owns the account
    user = User(id=str(user_id), email=token_data.get("email"))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # A parallel first request provisioned the same user
        db.rollback()
        logger.info(f"[Auth] ℹ️ User {user_id} provisioned concurrently, reloading")
        return db.query(User).filter(User.id == str(user_id)).one()

    db.refresh(user)
    logger.info(f"[Auth] 👤 Provisioned user {user.id}")
    return user
