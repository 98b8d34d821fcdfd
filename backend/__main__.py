"""
Run the User Registry API with `python -m backend`.

Serves backend.main:app on port 8001 with a root log handler using
LOG_FORMAT at the configured level.
"""
import logging

import uvicorn

from backend.main import LOG_FORMAT, app
from backend.settings import get_settings

if __name__ == "__main__":
    logging.basicConfig(level=get_settings().log_level, format=LOG_FORMAT)
    uvicorn.run(app, host="0.0.0.0", port=8001)
