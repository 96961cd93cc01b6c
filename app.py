"""
App assembly entry point.

Re-exports the FastAPI `app` from `judging.api.main`; run this file directly
to serve it with uvicorn on $PORT.
"""
import logging
import os

from judging.api.main import app  # noqa: F401

logger = logging.getLogger("judging")

PORT = int(os.getenv("PORT", "3001"))
HOST = os.getenv("HOST", "0.0.0.0")


if __name__ == "__main__":
    import uvicorn

    logger.info("=================================")
    logger.info("Server running on port %s", PORT)
    logger.info("Local: http://localhost:%s", PORT)
    logger.info("=================================")
    uvicorn.run(app, host=HOST, port=PORT)
