# cookbridge/routers/health.py
from __future__ import annotations

from fastapi import APIRouter, Response, status

from cookbridge.services.health import check_ollama, version_payload

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    # Liveness only: if the process is serving requests, it's up
    return {"status": "ok", **version_payload()}


@router.get("/health/ready")
async def ready(response: Response):
    ollama = await check_ollama()

    overall = "ok"
    http_status = status.HTTP_200_OK

    # Grocery lists can't be built without recipe lookups
    if ollama["status"] != "ok":
        overall = "fail"
        http_status = status.HTTP_503_SERVICE_UNAVAILABLE

    response.status_code = http_status
    return {
        "status": overall,
        "checks": {"ollama": ollama},
        **version_payload(),
    }


@router.get("/version")
def version():
    return version_payload()
