#!/usr/bin/env python3
"""Development server runner for Broadside."""

import uvicorn

from broadside.utils.constants import SERVER_HOST, SERVER_PORT

if __name__ == "__main__":
    uvicorn.run(
        "broadside.server.main:app",
        host=SERVER_HOST,
        port=SERVER_PORT,
        reload=True,  # Auto-reload on code changes
        log_level="info",
    )
