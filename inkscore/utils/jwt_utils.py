# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.

import os
from datetime import datetime, timedelta
from jose import JWTError, jwt
from fastapi import HTTPException, status  # ✅ For raising clean auth errors

if os.environ.get("ENV") != "production":
    from dotenv import load_dotenv
    load_dotenv()

# 🔐 Load secret key from environment (the auth provider's JWT secret)
SECRET_KEY = os.getenv("JWT_SECRET_KEY")
if not SECRET_KEY:
    raise RuntimeError("JWT_SECRET_KEY environment variable is not set.")

ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = 60  # 1 hour, same as the auth provider's sessions

# ✅ Function to create a signed JWT token (local tooling and tests)
def create_access_token(data: dict, expires_delta: timedelta = None) -> str:
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)

# ✅ Function to verify and decode a JWT token
def verify_access_token(token: str) -> dict:
    try:
        # Provider tokens carry an "aud" claim we don't pin
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM], options={"verify_aud": False})
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
