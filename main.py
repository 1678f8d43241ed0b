import logging

from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware

from config.settings import CORS_ORIGINS, LOG_LEVEL
from config.database import Base, engine

# Auth routes
from app.api.endpoints.auth_credentials import router as auth_cred_routes

from app.routes.baby_routes import router as baby_routes
from app.routes.growth_routes import router as growth_routes
from app.routes.milestone_routes import router as milestone_routes

# Models must be imported before create_all
from app.models import auth_models, baby_model, growth_record_model, achieved_milestone_model  # noqa: F401

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

Base.metadata.create_all(bind=engine)

# FastAPI instance
app = FastAPI(
    title="TinySteps API",
    version="0.1.0",
    description="Backend for tracking baby growth and milestones",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Main router under /api
routerAPI = APIRouter(prefix="/api")

routerAPI.include_router(auth_cred_routes)
routerAPI.include_router(baby_routes)
routerAPI.include_router(growth_routes)
routerAPI.include_router(milestone_routes)
# Attach to the application
app.include_router(routerAPI)



@app.get("/", tags=["Root"])
async def read_root():
    return {"status": "TinySteps API is up!"}
