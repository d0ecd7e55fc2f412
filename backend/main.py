import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import Settings, check_settings, get_settings
from content_kinds import FLASHCARDS, QUIZ
from deps import get_completion_client
from errors import GenerationError
from log_config import setup_logging
from models import CardsRequest, CardsResponse, ErrorResponse, QuizRequest, QuizResponse
from services.completion import CompletionClient
from services.generation import generate

logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}

router = APIRouter()


# ── Generate Flashcards ───────────────────────────────────────────────────────
@router.post("/generate-cards", response_model=CardsResponse, responses=_ERROR_RESPONSES)
async def generate_cards_endpoint(
    data: CardsRequest,
    client: CompletionClient = Depends(get_completion_client),
    settings: Settings = Depends(get_settings),
):
    """Generate a flashcard set for a free-text topic."""
    cards = await generate(FLASHCARDS, data.topic, data.count, client, settings)
    return CardsResponse(cards=cards)


# ── Generate Quiz ─────────────────────────────────────────────────────────────
@router.post("/generate-quiz", response_model=QuizResponse, responses=_ERROR_RESPONSES)
async def generate_quiz_endpoint(
    data: QuizRequest,
    client: CompletionClient = Depends(get_completion_client),
    settings: Settings = Depends(get_settings),
):
    """Generate multiple-choice questions; `correct` is the letter of the right option."""
    questions = await generate(QUIZ, data.topic, data.numQuestions, client, settings)
    return QuizResponse(questions=questions)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level)
    check_settings(settings)
    app.state.completion_client = CompletionClient.from_settings(settings)
    logger.info("Using model %s", settings.chat_model)
    try:
        yield
    finally:
        await app.state.completion_client.close()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Study Content Generator API",
        description="Turn a topic into flashcards or multiple-choice quizzes using an LLM.",
        version="1.0.0",
        lifespan=lifespan,
    )

    # ── CORS ──────────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Errors ────────────────────────────────────────────────────────────────
    @app.exception_handler(GenerationError)
    async def generation_error_handler(request: Request, exc: GenerationError):
        logger.warning("%s %s failed (%s): %s", request.method, request.url.path, exc.kind, exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "invalid request body"})

    # Body decode failures surface as a bare 400 HTTPException
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 400:
            message = "invalid request body"
        else:
            message = exc.detail if isinstance(exc.detail, str) else "request failed"
        return JSONResponse(
            status_code=exc.status_code, content={"error": message}, headers=exc.headers
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "internal server error"})

    # ── Liveness ──────────────────────────────────────────────────────────────
    @app.get("/")
    async def root():
        return {
            "status": "ok",
            "service": app.title,
            "version": app.version,
            "endpoints": ["POST /generate-cards", "POST /generate-quiz"],
        }

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(router)
    # The browser client posts to /api/generate-cards
    app.include_router(router, prefix="/api", include_in_schema=False)

    return app


app = create_app()
