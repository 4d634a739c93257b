#!/usr/bin/env python3
# backend/run.py
"""
Server runner for the Courtbook API.

Usage: python run.py
"""
import uvicorn

from courtbook.core.config import settings

if __name__ == "__main__":
    print(f"🚀 Server starting on port {settings.port}")
    print(f"📚 API Docs: http://localhost:{settings.port}/docs")

    uvicorn.run(
        "courtbook.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=not settings.is_production,
        log_level=settings.log_level.lower(),
    )
