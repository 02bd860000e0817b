# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.

import os
from fastapi import HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address
from inkscore.utils.jwt_utils import verify_access_token

ANALYSIS_RATE_LIMIT = os.getenv("ANALYSIS_RATE_LIMIT", "10/minute")


def get_user_or_ip(request: Request) -> str:
    # Limit per authenticated user; fall back to client IP
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        try:
            payload = verify_access_token(auth_header.split(" ", 1)[1])
            if payload.get("sub"):
                return f"user:{payload['sub']}"
        except HTTPException:
            pass  # invalid tokens are rejected by require_token, not here
    return get_remote_address(request)


limiter = Limiter(key_func=get_user_or_ip)
