# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.


import os
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from apscheduler.schedulers.background import BackgroundScheduler
from pytz import timezone

from inkscore.models import database
from inkscore.models import *  # registers all models

from inkscore.routers import analysis_router, trait_trends_router, profile_router, healthz_router
from inkscore.utils.schedulers.snapshot_reconcile_cron import rebuild_previous_day_snapshots
from inkscore.utils.trait_validation import ValidationError

from inkscore.utils.rate_limit_utils import limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SCHEDULER_TIMEZONE = os.getenv("SCHEDULER_TIMEZONE", "UTC")
ENABLE_SCHEDULER = os.getenv("ENABLE_SCHEDULER", "true").lower() == "true"

# Create DB tables in one go
database.Base.metadata.create_all(bind=database.engine)

# Scheduler setup
scheduler = BackgroundScheduler(job_defaults={"misfire_grace_time": 60})

@asynccontextmanager
async def lifespan(app: FastAPI):
    if not ENABLE_SCHEDULER:
        yield
        return

    # 🕑 Rebuild yesterday's personality snapshots every day at 2 AM
    scheduler.add_job(
        rebuild_previous_day_snapshots, "cron", hour=2, minute=0,
        timezone=timezone(SCHEDULER_TIMEZONE), id="snapshot_reconcile", replace_existing=True
    )

    scheduler.start()
    yield
    scheduler.shutdown()

# Create FastAPI app with lifespan
app = FastAPI(
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    title="InkScore Handwriting Personality API",
    description="Handwriting feature analysis, personality traits and trends",
    version="1.0"
)

app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

# Include routers
app.include_router(analysis_router.router)
app.include_router(trait_trends_router.router)
app.include_router(profile_router.router)
app.include_router(healthz_router.router)


# ---------------------- ADDING EXCEPTION HANDLERS ----------------------
@app.exception_handler(RateLimitExceeded)
async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"detail": "Too many requests. Please slow down."}
    )


@app.exception_handler(ValidationError)
async def trait_validation_handler(request: Request, exc: ValidationError):
    logger.warning(f"[Validation] ⚠️ Rejected payload on {request.url.path}: {exc}")
    return JSONResponse(status_code=422, content={"detail": exc.to_dict()})


@app.get("/")
def read_root():
    return {"message": "Welcome to InkScore - handwriting personality backend Live"}
