# app/main.py
import os
import time
import logging
import uuid
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from app.routers.profile import router as profile_router
from app.routers.plans import router as plans_router
from app.routers.workouts import router as workouts_router
from app.routers.history import router as history_router
from app.routers.sync import router as sync_router
from app.db import SessionLocal  # for healthz DB check
from app.settings import get_settings

log = logging.getLogger("uvicorn")
logging.getLogger("app").setLevel(get_settings().LOG_LEVEL)

app = FastAPI(
    title="Progression API",
    openapi_tags=[
        {"name": "profile", "description": "Onboarding profile & training settings"},
        {"name": "plans", "description": "Mesocycle generation and plan management"},
        {"name": "workouts", "description": "Daily workouts: check-in, set logging, completion"},
        {"name": "history", "description": "Workout history, personal records, progress"},
        {"name": "sync", "description": "Full-state export/import"},
    ],
)


# CORS (relax for local dev; tighten origins in prod via env)
ALLOW_ORIGINS = os.getenv("ALLOW_ORIGINS", "*").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.get("/")
def root():
    return {"ok": True, "name": "Progression API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": os.getenv("API_VERSION", "dev")}

# Routers
app.include_router(profile_router)
app.include_router(plans_router)
app.include_router(workouts_router)
app.include_router(history_router)
app.include_router(sync_router)
