# server/config.py
import os
from dotenv import load_dotenv

load_dotenv()

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")

# Model routing
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

# Output budgets per endpoint (max_output_tokens)
MAX_TOKENS_HINT = 60
MAX_TOKENS_EXERCISES = 200
MAX_TOKENS_MATCH_HINT = 50
MAX_TOKENS_MATH_HINT = 40

DEFAULT_EXERCISE_COUNT = 5

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))

# CORS (adjust if the frontend moves)
ALLOWED_ORIGINS = [
    o.strip()
    for o in os.getenv("ALLOWED_ORIGINS", "https://proyectotesis.netlify.app").split(",")
    if o.strip()
]
