# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.



from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from inkscore.models.database import SessionLocal

router = APIRouter()


@router.get("/healthz")
async def health_check():
    db: Session = SessionLocal()
    result = {"db_connection": False}

    try:
        # ✅ Check DB read
        db.execute(text("SELECT 1"))
        result["db_connection"] = True
        return {"status": "ok", "details": result}

    except SQLAlchemyError as e:
        return {
            "status": "error",
            "error": str(e),
            "details": result
        }

    finally:
        db.close()
