"""
server/main.py
Pistas backend – FastAPI

Hint and exercise endpoints for the syllable, word-image and counting games.
Every route answers 200: when the model is unreachable or says something
unusable, a static fallback is served instead.
"""

# =========================
# Standard & third-party
# =========================
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import httpx

from server import config
from server.prompting import PromptBuilder
from services.exercises import filter_exercises, normalize_count, parse_json
from services.fallbacks import (
    FALLBACKS,
    NO_AI_ERROR,
    fallback_exercises,
    match_hint_fallback,
)
from services.openai_client import CompletionClient

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Root handler if none exists yet; app loggers always pass INFO through."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    for name in ("server", "services"):
        logging.getLogger(name).setLevel(level)


configure_logging()
logger = logging.getLogger(__name__)

OPENAI_MODELS_URL = "https://api.openai.com/v1/models"


async def read_body(request: Request) -> dict:
    """JSON body as a dict; anything unparsable or non-object counts as empty."""
    try:
        data = await request.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


# =========================
# App factory
# =========================
def create_app(client: Optional[CompletionClient] = None,
               allowed_origins: Optional[list] = None) -> FastAPI:
    client = client or CompletionClient()
    prompts = PromptBuilder()
    origins = config.ALLOWED_ORIGINS if allowed_origins is None else allowed_origins

    app = FastAPI(title="Pistas Backend", version="1.0.0")
    app.state.completion_client = client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    logger.info("[boot] model=%s origins=%s key_present=%s",
                getattr(client, "model", "?"), origins, bool(config.OPENAI_API_KEY))

    # =========================
    # Health / Diagnostics
    # =========================
    @app.get("/health")
    async def health(net: str = ""):
        """
        Basic health check. Add ?net=1 to test outbound access to OpenAI.
        Any value other than empty or "0" turns the probe on.
        """
        info = {"ok": True}
        if net.strip() not in ("", "0"):
            info["net"] = {"env_key_present": bool(config.OPENAI_API_KEY)}
            try:
                headers = {"Authorization": f"Bearer {config.OPENAI_API_KEY}"}
                async with httpx.AsyncClient(timeout=8) as http:
                    r = await http.get(OPENAI_MODELS_URL, headers=headers)
                info["net"]["openai_models"] = {"status": r.status_code, "ok": r.status_code < 400}
            except Exception as e:
                info["net"]["openai_models"] = f"error: {type(e).__name__}: {e}"
        return JSONResponse(info)

    # =========================
    # Syllables: hint
    # =========================
    @app.post("/api/hint")
    async def syllable_hint(request: Request):
        body = await read_body(request)
        target_syllable = body.get("targetSyllable")
        slots = body.get("slots")
        letters = body.get("letters")
        logger.info("[hint] request targetSyllable=%r slots=%r letters=%r",
                    target_syllable, slots, letters)

        messages = prompts.build_syllable_hint_messages(
            target_syllable=target_syllable, slots=slots, letters=letters,
        )
        try:
            text = await client.complete(messages, config.MAX_TOKENS_HINT)
        except Exception as e:
            logger.error("[hint] upstream failed: %r", e)
            text = ""
        return JSONResponse({"hint": text or FALLBACKS["hint"]})

    # =========================
    # Syllables: new exercises
    # =========================
    @app.post("/api/exercises")
    async def exercises(request: Request):
        body = await read_body(request)
        count = normalize_count(body.get("count"))
        logger.info("[exercises] request count=%s", count)

        messages = prompts.build_exercises_messages(count=count)
        try:
            raw = await client.complete(messages, config.MAX_TOKENS_EXERCISES)
        except Exception as e:
            logger.error("[exercises] upstream failed: %r", e)
            return JSONResponse({"error": NO_AI_ERROR, "exercises": fallback_exercises(count)})

        safe = filter_exercises(parse_json(raw), count)
        if not safe:
            logger.warning("[exercises] unusable model output, serving built-in list")
            return JSONResponse({"exercises": fallback_exercises(count)})
        return JSONResponse({"exercises": safe})

    # =========================
    # Word-image match: hint
    # =========================
    @app.post("/api/match/hint")
    async def match_hint(request: Request):
        body = await read_body(request)
        target_word = body.get("targetWord")
        options = body.get("options", [])
        logger.info("[match] request targetWord=%r options=%r", target_word, options)

        messages = prompts.build_match_hint_messages(target_word=target_word, options=options)
        try:
            text = await client.complete(messages, config.MAX_TOKENS_MATCH_HINT)
        except Exception as e:
            logger.error("[match] upstream failed: %r", e)
            text = ""
        return JSONResponse({"hint": text or match_hint_fallback(target_word)})

    # =========================
    # Math: counting hint
    # =========================
    @app.post("/api/math/hint")
    async def math_hint(request: Request):
        body = await read_body(request)
        target_number = body.get("targetNumber")
        options = body.get("options", [])
        logger.info("[math] request targetNumber=%r options=%r", target_number, options)

        messages = prompts.build_math_hint_messages(target_number=target_number, options=options)
        try:
            text = await client.complete(messages, config.MAX_TOKENS_MATH_HINT)
        except Exception as e:
            logger.error("[math] upstream failed: %r", e)
            text = ""
        return JSONResponse({"hint": text or FALLBACKS["math_hint"]})

    return app


app = create_app()


# =========================
# Entry-point
# =========================
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
