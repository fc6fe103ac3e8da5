import os

# --- Version / build metadata (override via systemd env) ---
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
GIT_SHA = os.getenv("GIT_SHA", "unknown")
BUILD_DATE = os.getenv("BUILD_DATE", "unknown")

OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://127.0.0.1:11434")
OLLAMA_MODEL = os.getenv("OLLAMA_MODEL", "qwen2.5:14b")
OLLAMA_TIMEOUT_S = int(os.getenv("OLLAMA_TIMEOUT_S", "120"))

# Request limits carried over from the old validation middleware
MAX_RECIPES_PER_LIST = int(os.getenv("MAX_RECIPES_PER_LIST", "20"))
MAX_SERVINGS = int(os.getenv("MAX_SERVINGS", "50"))

CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:8080").split(",")
    if o.strip()
]

SYSTEM_RECIPE_LOOKUP = """You are a recipe database.

RULES:
- Output ONLY valid JSON.
- Do NOT include markdown, comments, or explanations.
- Do NOT include trailing commas.
- Do NOT include text outside the JSON object.
- All strings must be double-quoted.

The JSON schema MUST be:
{
  "id": 0,
  "name": "Recipe Name",
  "servings": 4,
  "cookingTime": 30,
  "ingredients": ["ingredient1", "ingredient2"]
}

REQUIREMENTS:
- "servings" is a positive integer.
- "cookingTime" is the total time in minutes.
- Each ingredient is a plain lowercase name without quantities (e.g. "eggs", "olive oil").
- If you cannot provide a recipe, return {"found": false}.
"""
