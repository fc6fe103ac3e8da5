import httpx
from typing import Any, Dict, List, Optional

from cookbridge.core import config


class OllamaClient:
    def __init__(
        self,
        base_url: str = "http://127.0.0.1:11434",
        model: str = "qwen2.5:14b",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.transport = transport

    async def chat(
        self,
        messages: List[Dict[str, str]],
        temperature: float = 0.2,
        timeout_s: int = 180,
        fmt: Optional[str] = None,
    ) -> str:
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "stream": False,
            "options": {"temperature": temperature},
        }
        # "json" constrains the model to emit a single JSON value
        if fmt:
            payload["format"] = fmt

        async with httpx.AsyncClient(timeout=timeout_s, transport=self.transport) as client:
            r = await client.post(f"{self.base_url}/api/chat", json=payload)
            r.raise_for_status()
            try:
                data = r.json()
            except ValueError as e:
                raise httpx.DecodingError(f"Ollama response is not JSON: {e}", request=r.request) from e

        # Ollama returns: {"message": {"role": "...", "content": "..."}, ...}
        message = data.get("message") if isinstance(data, dict) else None
        if not isinstance(message, dict):
            raise httpx.DecodingError("Ollama response has no chat message", request=r.request)
        return message.get("content") or ""


ollama = OllamaClient(
    base_url=config.OLLAMA_BASE_URL,
    model=config.OLLAMA_MODEL,
)
