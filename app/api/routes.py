import logging
import secrets
from typing import Any

from fastapi import APIRouter, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import AuthenticationFailure, OracleError, RequestValidationFailure
from app.models.pydantic import EvaluationRequest

logger = logging.getLogger(__name__)

router = APIRouter()

ORACLE_PATH = "/oracle/eval"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def _json_response(status_code: int, body: dict[str, Any]) -> JSONResponse:
    # Jede Antwort trägt die CORS-Header, auch Fehler
    return JSONResponse(body, status_code=status_code, headers=CORS_HEADERS)


def _authenticate(auth_header: str | None, expected_key: str) -> None:
    if not auth_header or not auth_header.startswith("Bearer "):
        raise AuthenticationFailure()
    api_key = auth_header[len("Bearer "):]
    # leerer konfigurierter Key lässt niemanden durch
    if not api_key or not expected_key or not secrets.compare_digest(
        api_key.encode(), expected_key.encode()
    ):
        raise AuthenticationFailure()


def _parse_request(body: Any) -> EvaluationRequest:
    if not isinstance(body, dict):
        raise RequestValidationFailure()
    try:
        return EvaluationRequest.model_validate(body)
    except ValidationError as e:
        raise RequestValidationFailure() from e


# einfacher Health-Check
@router.get("/health")
async def health():
    return {"status": "ok"}


# CORS-Preflight
@router.options(ORACLE_PATH)
async def oracle_preflight():
    return Response(status_code=200, headers=CORS_HEADERS)


# alle anderen Methoden: Starlette wirft 405, hier mit CORS-Headern beantwortet
async def oracle_http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405 and request.url.path == ORACLE_PATH:
        return _json_response(405, {"error": "Method not allowed"})
    return await http_exception_handler(request, exc)


# bewertet eine MRE-Antwort gegen die Baseline
@router.post(ORACLE_PATH)
async def oracle_eval(request: Request):
    settings = request.app.state.settings
    judge = request.app.state.oracle_judge

    try:
        # 1. API-Key prüfen (vor allem anderen)
        _authenticate(request.headers.get("authorization"), settings.mre_api_key)

        # 2. Body parsen und validieren
        req = _parse_request(await request.json())

        # 3. Judge aufrufen (synchroner LLM-Client im Threadpool)
        result = await run_in_threadpool(judge.judge, req)
    except OracleError as e:
        logger.warning("Oracle-Request abgelehnt: %s (status=%s)", e.error, e.status_code)
        return _json_response(e.status_code, e.payload())
    except Exception as e:
        logger.exception("Oracle evaluation error")
        return _json_response(
            500,
            {"error": "Internal server error", "message": str(e) or "Unknown error"},
        )

    return _json_response(200, result.model_dump())
