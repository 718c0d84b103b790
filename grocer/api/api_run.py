from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import logging

from grocer.api.services import cart_engine, meal_plan_manager, recipe_catalog

# Routers
from grocer.api.routes import assistant, meal_plans, recipes, retail

# Logging
logger = logging.getLogger("grocer_app")

# Initialize FastAPI app
app = FastAPI(title="Grocer Shopping Assistant API")

# CORS and preflight support
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Include routers
app.include_router(assistant.router)
app.include_router(retail.router)
app.include_router(recipes.router)
app.include_router(meal_plans.router)


@app.on_event("startup")
def _log_startup_state():
    """Report what the seed tables provided when the app starts."""
    logger.info(
        "Grocer API ready: %d recipes, %d stores, %d meal plans in memory",
        len(recipe_catalog), len(cart_engine.stores), len(meal_plan_manager.plans),
    )


@app.get("/api/health")
def health():
    return {"status": "ok"}
