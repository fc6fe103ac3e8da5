# cookbridge/services/health.py
from __future__ import annotations

import time
from typing import Any, Dict, Optional

import httpx

from cookbridge.core import config


def _ms_since(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _check_result(status: str, latency_ms: int, error: Optional[str] = None) -> Dict[str, Any]:
    out: Dict[str, Any] = {"status": status, "latency_ms": latency_ms}
    if error:
        out["error"] = error
    return out


async def check_ollama() -> Dict[str, Any]:
    start = time.perf_counter()
    try:
        # /api/tags is a cheap health-ish endpoint for Ollama
        async with httpx.AsyncClient(timeout=2.0) as client:
            r = await client.get(f"{config.OLLAMA_BASE_URL.rstrip('/')}/api/tags")
            r.raise_for_status()
        return _check_result("ok", _ms_since(start))
    except httpx.HTTPError as e:
        # recipe lookups need the model, so this is a hard failure
        return _check_result("fail", _ms_since(start), str(e))


def version_payload() -> Dict[str, Any]:
    return {
        "version": config.APP_VERSION,
        "git_sha": config.GIT_SHA,
        "build_date": config.BUILD_DATE,
    }
