# barbershop/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session

from barbershop.config import CORS_ORIGINS, LOG_LEVEL, SEED_DEFAULT_SERVICES
from barbershop.data import seed_services
from barbershop.db import create_db_and_tables, engine
from barbershop.routers.accounts_routes import router as accounts_router
from barbershop.routers.appointments_routes import router as appointments_router
from barbershop.routers.dashboard_routes import router as dashboard_router
from barbershop.routers.profile_routes import router as profile_router
from barbershop.routers.services_routes import router as services_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    create_db_and_tables()
    if SEED_DEFAULT_SERVICES:
        with Session(engine) as session:
            seeded = seed_services(session)
        if seeded:
            logger.info(f"Seeded {seeded} default services")
    yield
    logger.info("Application shutting down...")


app = FastAPI(title="Odake Barbas Booking API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(accounts_router)
app.include_router(services_router)
app.include_router(appointments_router)
app.include_router(dashboard_router)
app.include_router(profile_router)


@app.get("/health")
def health_check():
    return {"status": "ok"}
