"""
Main application wiring the command routes into a FastAPI app.
"""

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from fsbridge import __version__
from fsbridge.api.routers import invoke_validation_error_handler
from fsbridge.api.routers import router as api_router
from fsbridge.config.settings import settings

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Get logger for this module
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(title="fsbridge", version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(api_router)
app.add_exception_handler(RequestValidationError, invoke_validation_error_handler)

logger.info(f"CORS allowed origins: {', '.join(settings.cors_allow_origins)}")
