# Role: FastAPI app bootstrap. Loads environment config early, registers routers, and exposes health/docs endpoints.

from fastapi import FastAPI

import backend.config
backend.config.load_env()

from backend.api.skill import router as skill_router

app = FastAPI(title="Meal Report Skill API", version="0.1.0")
app.include_router(skill_router)

@app.get("/")
def root() -> dict:
    # Role: quick discoverability for clients (where are docs/health/skill endpoint).
    return {
        "message": "Meal Report Skill API is running",
        "skill": "/skill",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
