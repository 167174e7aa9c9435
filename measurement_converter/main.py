"""Measurement Converter - Main Application"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from measurement_converter import __version__
from measurement_converter.api.conversion import router as conversion_router
from measurement_converter.common.config import settings

logging.basicConfig(
    level=settings.app.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = FastAPI(
    title="Measurement Converter",
    description="Unit conversion across physical quantities",
    version=__version__,
    debug=settings.app.debug
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(conversion_router)

@app.get("/")
async def root():
    return {"message": settings.app.name, "status": "running"}

@app.get("/health")
async def health():
    return {"status": "healthy"}
