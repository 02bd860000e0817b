# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from inkscore.models.database import get_db
from inkscore.models.user import User
from inkscore.models.user_profile import UserProfile
from inkscore.schemas.profile_schemas import ProfileCreateRequest, ProfileResponse, ProfileUpdateRequest
from inkscore.utils.auth_utils import get_current_user

router = APIRouter()
logger = logging.getLogger(__name__)


def _get_profile(db: Session, user_id: str) -> UserProfile:
    profile = db.query(UserProfile).filter(UserProfile.user_id == user_id).first()
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


def _to_response(profile: UserProfile, user: User) -> ProfileResponse:
    return ProfileResponse(
        id=profile.id,
        user_id=profile.user_id,
        email=user.email,
        full_name=profile.full_name,
        bio=profile.bio,
        avatar_url=profile.avatar_url,
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )


def _clean(text):
    # blank strings are stored as NULL
    if not text:
        return None
    return text.strip() or None


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return _to_response(_get_profile(db, user.id), user)


@router.post("/profile", response_model=ProfileResponse, status_code=201)
async def create_profile(
    payload: ProfileCreateRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Creates the caller's profile. full_name is required and cannot be blank;
    a second create is refused with 409 (use PUT to update).
    """
    if not payload.full_name or not payload.full_name.strip():
        raise HTTPException(status_code=400, detail="full_name is required and cannot be empty")

    if db.query(UserProfile).filter(UserProfile.user_id == user.id).first():
        raise HTTPException(status_code=409, detail="Profile already exists. Use PUT to update.")

    profile = UserProfile(
        user_id=user.id,
        full_name=payload.full_name.strip(),
        bio=_clean(payload.bio),
        avatar_url=payload.avatar_url or None,
    )
    db.add(profile)
    db.commit()
    db.refresh(profile)

    logger.info(f"[Profile] ✅ Created profile for user {user.id}")
    return _to_response(profile, user)


@router.put("/profile", response_model=ProfileResponse)
async def update_profile(
    payload: ProfileUpdateRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    if not (payload.full_name or payload.bio or payload.avatar_url):
        raise HTTPException(status_code=400, detail="At least one field must be provided for update")

    profile = _get_profile(db, user.id)

    changes = payload.model_dump(exclude_unset=True)
    if "full_name" in changes:
        if not payload.full_name or not payload.full_name.strip():
            raise HTTPException(status_code=400, detail="full_name cannot be empty")
        profile.full_name = payload.full_name.strip()
    if "bio" in changes:
        profile.bio = _clean(payload.bio)
    if "avatar_url" in changes:
        profile.avatar_url = payload.avatar_url or None

    db.commit()
    db.refresh(profile)

    logger.info(f"[Profile] ✏️ Updated {sorted(changes)} for user {user.id}")
    return _to_response(profile, user)


@router.delete("/profile")
async def delete_profile(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    # Idempotent: deleting a missing profile still succeeds
    deleted = db.query(UserProfile).filter(UserProfile.user_id == user.id).delete()
    db.commit()

    logger.info(f"[Profile] 🗑️ Deleted {deleted} profile(s) for user {user.id}")
    return {"message": "Profile deleted successfully"}
