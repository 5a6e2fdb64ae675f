#!/usr/bin/env python3
"""Development server script."""
import os

import uvicorn


def run_server() -> None:
    """Run the development server with auto-reload."""
    uvicorn.run(
        "tindev.main:app",
        host=os.getenv("HOST", "localhost"),
        port=int(os.getenv("PORT", "8000")),
        reload=True,
        reload_delay=1,
        workers=1,
    )


if __name__ == "__main__":
    run_server()
