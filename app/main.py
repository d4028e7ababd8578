import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.logging_config import setup_logging
from app.repositories.vehicle_map import VehicleMap
from app.routers.vehicles import router as vehicles_router
from app.seed import build_initial_vehicles
from app.services.vehicle_service import VehicleService
from app.utils.exceptions import register_exception_handlers

logger = logging.getLogger(__name__)


def build_vehicle_service() -> VehicleService:
    return VehicleService(VehicleMap(build_initial_vehicles(settings)))


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    app.state.vehicle_service = build_vehicle_service()
    logger.info("Vehicle store ready with %d vehicles", len(app.state.vehicle_service.repository))
    yield


app = FastAPI(
    title="Vehicle Registry API",
    description="In-memory CRUD and query API for vehicles",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(vehicles_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    return {"status": "success", "data": {"service": settings.app_name, "version": settings.app_version}, "message": None}
