#!/usr/bin/env python3
"""
Run the Place Bookmark API server
"""
import logging

import uvicorn

from apps.core.config import settings

if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run(
        "apps.api.main:app",
        host="0.0.0.0",
        port=settings.port or 8000,
        reload=settings.environment == "development",
        log_level=settings.log_level,
    )
