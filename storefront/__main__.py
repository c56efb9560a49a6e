#!/usr/bin/env python
"""
Run Storefront API with uvicorn
"""
import uvicorn

from storefront.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "storefront.main:app",
        host="0.0.0.0",
        port=settings.SERVICE_PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
