#!/usr/bin/env python
"""Script to run the task API server."""
import os
from pathlib import Path

import uvicorn

from todo_api.config import HOST, PORT, RELOAD

# Run from the repo root so the relative SQLite path lands next to this script
os.chdir(Path(__file__).resolve().parent)

if __name__ == "__main__":
    uvicorn.run(
        "todo_api.main:app",
        host=HOST,
        port=PORT,
        reload=RELOAD
    )
