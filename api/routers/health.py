"""
Health check router.

This router provides health check endpoints for monitoring and load balancers.
"""

import logging

from fastapi import APIRouter

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


# =============================================================================
# Health Check Endpoints
# =============================================================================


@router.get("/health")
def health():
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}
