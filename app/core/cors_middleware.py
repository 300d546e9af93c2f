"""
CORS Middleware Module

Registers cross-origin access for the interview frontend. Allowed origins are
read from the comma separated CORS_ORIGINS environment variable and default to
the local development servers.

Dependencies:
- fastapi.middleware.cors: For CORS middleware functionality.
- loguru: For logging the configured origins.

Author: @kcaparas1630
"""

import os
from typing import List
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

DEFAULT_ORIGINS = "http://localhost:3000,http://localhost:5000"


def get_allowed_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS", DEFAULT_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]

def add_cors_middleware(app: FastAPI):
    origins = get_allowed_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )
    logger.info(f"CORS middleware added for origins: {', '.join(origins)}")
