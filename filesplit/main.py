"""FastAPI application entrypoint using router composition."""
from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI

import uvicorn

from filesplit import __version__
from filesplit.api.default import router as default_router
from filesplit.api.jobs import router as jobs_router
from filesplit.config import get_settings

router = APIRouter()
logger = logging.getLogger(__name__)

router.include_router(default_router)
router.include_router(jobs_router)

settings = get_settings()
app = FastAPI(title=settings.app_name, version=__version__)
app.include_router(router)


if __name__ == "__main__":
    logging.basicConfig(level=settings.logging_level, format=settings.log_format)
    uvicorn.run("filesplit.main:app", host="0.0.0.0", port=9000)
