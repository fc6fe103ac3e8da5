# cookbridge/services/recipe_lookup.py
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Protocol

import httpx
from pydantic import ValidationError

from cookbridge.core import config
from cookbridge.core.errors import RecipeNotFound, UpstreamUnavailable
from cookbridge.core.text import extract_json
from cookbridge.models.grocery import RecipeRef

log = logging.getLogger("cookbridge.recipe_lookup")


class RecipeSource(Protocol):
    async def get_recipe_by_id(self, recipe_id: int) -> RecipeRef: ...


class _NotARecipe(ValueError):
    pass


class RecipeLookup:
    """
    Resolves a recipe id to a RecipeRef by asking the chat model.

    Retries once with a correction prompt when the model output is not a
    usable recipe. Never caches.
    """

    def __init__(self, ollama_client: Any, timeout_s: int = config.OLLAMA_TIMEOUT_S):
        self.ollama_client = ollama_client
        self.timeout_s = timeout_s

    async def _call(self, recipe_id: int, messages: List[Dict[str, str]]) -> RecipeRef:
        try:
            out = await self.ollama_client.chat(
                messages, temperature=0.0, timeout_s=self.timeout_s, fmt="json"
            )
        except httpx.HTTPStatusError as e:
            raise UpstreamUnavailable(f"LLM returned HTTP {e.response.status_code}", recipe_id) from e
        except httpx.HTTPError as e:
            raise UpstreamUnavailable(f"LLM request failed: {e}", recipe_id) from e
        except (ValueError, AttributeError) as e:
            # a broken response envelope, not bad model output
            raise UpstreamUnavailable(f"LLM returned an unreadable response: {e}", recipe_id) from e

        payload = json.loads(extract_json(out))
        if not isinstance(payload, dict) or payload.get("found") is False:
            raise _NotARecipe("model reported no recipe")

        payload["id"] = recipe_id
        return RecipeRef.model_validate(payload)

    async def get_recipe_by_id(self, recipe_id: int) -> RecipeRef:
        user = f"Provide the recipe with ID {recipe_id}. Return ONLY the JSON object."
        messages = [
            {"role": "system", "content": config.SYSTEM_RECIPE_LOOKUP},
            {"role": "user", "content": user},
        ]

        try:
            return await self._call(recipe_id, messages)
        except _NotARecipe:
            raise RecipeNotFound(recipe_id) from None
        except (ValueError, ValidationError) as e:
            log.warning("recipe lookup output invalid, retrying", extra={"recipe_id": recipe_id, "error": str(e)})

        fix = (
            "Your previous output was invalid.\n"
            "Return ONLY valid JSON that matches the schema exactly.\n"
            '"servings" must be a positive integer and "ingredients" a list of strings.\n'
        )
        try:
            return await self._call(recipe_id, messages + [{"role": "user", "content": fix}])
        except (ValueError, ValidationError) as e:
            raise RecipeNotFound(recipe_id, reason=str(e)) from e
