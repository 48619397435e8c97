"""
Health check endpoints for monitoring and container orchestration.
"""
import time

from fastapi import APIRouter

from app.core.config import settings
from app.core.deps import LoginVerifierDep, PasswordVerifierDep

router = APIRouter(prefix="", tags=["health"])


@router.get("/health")
async def health_check(
    login_verifier: LoginVerifierDep,
    password_verifier: PasswordVerifierDep,
):
    """Report application metadata and whether the credential oracles are configured."""
    start_time = time.perf_counter()

    verifiers = {
        "login_verifier": login_verifier,
        "password_verifier": password_verifier,
    }
    components = {
        name: {"status": "healthy", "type": type(verifier).__name__}
        for name, verifier in verifiers.items()
    }

    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "components": components,
        "total_latency_ms": round((time.perf_counter() - start_time) * 1000, 2),
    }


@router.get("/health/ready")
async def readiness_check():
    """
    Readiness check. There are no backing services, so the app is ready
    as soon as it serves requests.
    """
    return {"status": "ready"}


@router.get("/health/live")
async def liveness_check():
    """
    Liveness check - simple check that app is running.
    """
    return {"status": "alive"}
