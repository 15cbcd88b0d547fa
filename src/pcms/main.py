from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import text

from pcms.config import settings
from pcms.db.session import shutdown
from pcms.dependencies import DB
from pcms.exceptions import DomainError
from pcms.literals import ResponseCode, ResponseMessage
from pcms.logging import get_logger
from pcms.middleware import RequestIDMiddleware
from pcms.routers import account, contribution, employer, member, transaction
from pcms.schemas.result import DataResult, Result, error_result, success_data_result

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup before yield, shutdown after: close pooled database connections."""
    logger.info("application_started", service=settings.service_name)
    yield
    await shutdown()


app = FastAPI(title="PCMS API", lifespan=lifespan)
app.add_middleware(RequestIDMiddleware)
app.include_router(member.router)
app.include_router(account.router)
app.include_router(transaction.router)
app.include_router(employer.router)
app.include_router(contribution.router)


def _envelope_json(envelope: Result) -> dict[str, object]:
    return envelope.model_dump(mode="json", by_alias=True)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return 422 with code 14 and the validation messages as data.

    The messages are informational; clients must still treat the envelope as
    a failure.
    """
    messages = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    ]
    logger.info("request_validation_failed", errors=messages)
    envelope = DataResult(
        response_code=ResponseCode.FAILED_INPUT_VALIDATION,
        response_description=ResponseMessage.WRONG_INPUT,
        data=messages,
    )
    return JSONResponse(status_code=422, content=_envelope_json(envelope))


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.warning("domain_error", error=exc.message, path=request.url.path)
    envelope = error_result(ResponseCode.BAD_REQUEST, exc.message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_envelope_json(envelope))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the traceback and return a generic failure envelope (nothing leaked)."""
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    envelope = error_result(ResponseCode.EXCEPTION_ERROR, ResponseMessage.INTERNAL_ERROR)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=_envelope_json(envelope)
    )


@app.get("/health", response_model=DataResult[dict[str, str]])
async def health(db: DB) -> DataResult[dict[str, str]]:
    """Health check: 200 only if the database answers a ping."""
    await db.execute(text("SELECT 1"))
    return success_data_result({"status": "ok"})
