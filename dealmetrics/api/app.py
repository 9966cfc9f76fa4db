"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dealmetrics.config import settings
from dealmetrics.api.routes import analysis, deals, financing

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.api_title,
    description="Multifamily deal analysis: current vs market rent metrics",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analysis.router)
app.include_router(financing.router)
app.include_router(deals.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
