from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.bulk_import.router import router as bulk_import_router
from app.config import settings
from app.exception_handlers import register_exception_handlers
from app.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    yield


app = FastAPI(
    title="Bulk Import Engine",
    description="Paste-to-import pipeline for clients, contacts, contracts, licenses and hardware",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(bulk_import_router, prefix="/api/v1/bulk-import", tags=["bulk-import"])


@app.get("/api/v1/health")
async def health():
    return {"status": "healthy"}
