from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from app.core.config import settings
from app.core.logging import setup_logging
from app.api.routes import router as api_router

setup_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    logger.info("Mailbox backend is up")
    yield
    logger.info("Mailbox backend is down")


app = FastAPI(title="Game Mailbox Backend", lifespan=lifespan)

# CORS
origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# REST routes
app.include_router(api_router, prefix="/api")


@app.exception_handler(Exception)
async def exception_handler(_: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc!r}")
    return JSONResponse(status_code=500, content={"detail": "internal server error"})
