"""
FastAPI application for the screening prompt compiler.
Serves interview script previews and compiled call payloads to the dashboard.

Run with: uvicorn api.main:app --reload --port 8000
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from logging_config import setup_logging
from api.routes.agents import router as agents_router
from api.routes.interview import router as interview_router

setup_logging()

app = FastAPI(
    title="Screening Prompt API",
    description="Compiles interview agents into voice call scripts and evaluation schemas",
    version="1.0.0"
)

# Configure CORS for React frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(agents_router)
app.include_router(interview_router)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Screening Prompt API"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
