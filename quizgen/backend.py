# quizgen/backend.py

# 1️⃣ Imports
from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel
from typing import Any, Optional
from pathlib import Path
import logging
import os
from dotenv import load_dotenv

# 2️⃣ Local imports
from quizgen.session_store import SessionStore
from quizgen.prompts import build_question_prompt
from quizgen.llm_client import GeminiClient
from quizgen.llm_parsing import parse_and_obfuscate, UpstreamParseError

# 3️⃣ Paths and configuration
load_dotenv()

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
STATIC_DIR = BASE_DIR / "static"
ALLOWED_ORIGINS = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "*").split(",") if o.strip()]
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

MISSING_FIELDS_ERROR = "Topics, difficulty, and session_id are required"
INVALID_JSON_ERROR = "Gemini response was not valid JSON"
GENERATION_FAILED_ERROR = "Failed to generate question"

# Shared across requests; lost on restart
session_store = SessionStore()
_model_client: Optional[GeminiClient] = None


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# 4️⃣ Dependencies
def get_session_store() -> SessionStore:
    return session_store


def get_model_client() -> GeminiClient:
    """Return the process-wide Gemini client, built on first use."""
    global _model_client
    if _model_client is None:
        _model_client = GeminiClient()
    return _model_client


# 5️⃣ FastAPI app
app = FastAPI(title="QuizGen Backend - Gemini question generator")

# CORS - open to all origins unless ALLOWED_ORIGINS narrows it
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials="*" not in ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # A body that is not a JSON object carries none of the required fields
    logger.debug("Rejected request body: %s", exc.errors())
    return JSONResponse(status_code=400, content={"error": MISSING_FIELDS_ERROR})


# 6️⃣ Models
class GenerateQuestionRequest(BaseModel):
    # Presence is the only check; values are passed on as sent
    topics: Any = None
    difficulty: Any = None
    session_id: Any = None


# 7️⃣ Question generation endpoint
@app.post("/api/generate-question")
def generate_question(
    req: GenerateQuestionRequest,
    store: SessionStore = Depends(get_session_store),
    client: GeminiClient = Depends(get_model_client),
):
    """
    Generate one multiple-choice question for the caller's session.

    The session's earlier questions are sent to the model so it avoids
    repeats. The correct answer is returned only inside obfuscated_key.
    """
    if not req.topics or not req.difficulty or not req.session_id:
        return JSONResponse(status_code=400, content={"error": MISSING_FIELDS_ERROR})

    session_id = str(req.session_id)
    store.prune()
    session = store.get_or_create(session_id)

    try:
        prompt = build_question_prompt(req.topics, req.difficulty, list(session.questions))
        raw_text = client.generate(prompt)
        question_data = parse_and_obfuscate(raw_text)
    except UpstreamParseError as e:
        logger.error("Rejected Gemini response (%s). Raw response:\n%s", e, e.raw)
        return JSONResponse(status_code=500, content={"error": INVALID_JSON_ERROR, "raw": e.raw})
    except Exception:
        logger.exception("Error generating question")
        return JSONResponse(status_code=500, content={"error": GENERATION_FAILED_ERROR})

    session = store.record(session_id, question_data.get("question"))
    logger.info(
        "Generated question %d for session %s (topics=%s, difficulty=%s)",
        len(session.questions), session_id, req.topics, req.difficulty,
    )
    return question_data


# 8️⃣ Client UI
@app.get("/")
def serve_index():
    """Serve the quiz page."""
    return FileResponse(str(STATIC_DIR / "index.html"))


# 9️⃣ Health
@app.get("/health")
def health(store: SessionStore = Depends(get_session_store)):
    return {"status": "ok", "sessions_active": len(store)}


def main() -> None:
    import uvicorn

    configure_logging()
    logger.info("QuizGen server starting on %s:%d", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
