from dotenv import load_dotenv

load_dotenv()
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routes import oracle_http_exception_handler, router as api_router
from app.core.config import Settings, validate_startup_config
from app.llm.fake_client import FakeLLMClient
from app.llm.llm_client import LLMClient
from app.llm.openai_client import OpenAIClient
from app.services.judges import OracleJudge


def build_llm_client(settings: Settings) -> LLMClient:
    if settings.oracle_fake_llm:
        return FakeLLMClient()
    return OpenAIClient(
        model_name=settings.oracle_model,
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        temperature=settings.oracle_temperature,
        max_tokens=settings.oracle_max_tokens,
    )


def create_app(settings: Settings | None = None, llm_client: LLMClient | None = None) -> FastAPI:
    """
    Baut die FastAPI-App. Settings und LLM-Client werden einmalig erzeugt
    und über app.state an die Routen gereicht (in Tests: Fakes injizieren).
    """
    settings = settings or Settings()
    llm_client = llm_client or build_llm_client(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Validierung beim Startup
        validate_startup_config(settings)
        yield

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.oracle_judge = OracleJudge(
        llm_client,
        default_model=settings.oracle_model,
        default_prompt_version=settings.oracle_prompt_version,
        default_temperature=settings.oracle_temperature,
        default_max_tokens=settings.oracle_max_tokens,
    )
    app.include_router(api_router)
    app.add_exception_handler(StarletteHTTPException, oracle_http_exception_handler)

    @app.get("/")
    async def root():
        return {"message": "Oracle Evaluator API running"}

    return app


app = create_app()
