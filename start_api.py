#!/usr/bin/env python3
"""
API server startup script
"""
import uvicorn

from fxarb.settings import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "fxarb.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
