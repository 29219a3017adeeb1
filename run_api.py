#!/usr/bin/env python3
"""
Simple script to run the Care Call Manager API server.
"""

import logging

import uvicorn
from care_call_manager.config import load_config, load_env

if __name__ == "__main__":
    load_env()
    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    print("Starting Care Call Manager API...")
    print(f"API will be available at: http://localhost:{config.port}")
    print(f"Interactive docs at: http://localhost:{config.port}/docs")

    uvicorn.run(
        "care_call_manager.api.main:app",
        host=config.host,
        port=config.port,
        reload=True,  # Auto-reload on code changes
        log_level=config.log_level.lower()
    )
