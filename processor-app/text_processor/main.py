import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from text_processor.analysis import validate_and_analyze
from text_processor.exceptions import TextValidationError
from text_processor.logger import Log
from text_processor.models import (
    InternalErrorResponse,
    ProcessedTextRecord,
    ProcessResponse,
    ValidationErrorResponse,
)
from text_processor.settings import Settings
from text_processor.store import DynamoDBRecordStore, RecordStore

BODY_PREVIEW_CHARS = 200
REQUEST_ID_HEADERS = ("x-request-id", "x-amzn-requestid")


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _request_id(request: Request) -> str:
    for header in REQUEST_ID_HEADERS:
        value = request.headers.get(header)
        if value:
            return value
    return str(uuid.uuid4())


def _is_base64(request: Request) -> bool:
    encoding = request.headers.get("content-transfer-encoding", "")
    return encoding.strip().lower() == "base64"


def _respond(
    status_code: int,
    content: dict[str, object],
    request_id: str,
) -> JSONResponse:
    Log.info(
        "Response sent",
        request_id=request_id,
        status_code=status_code,
        response_body=content,
    )
    return JSONResponse(
        status_code=status_code,
        content=content,
        headers={"X-Request-ID": request_id},
    )


def _log_failure(
    reason: str,
    request: Request,
    body: bytes,
    request_id: str,
    timestamp: str,
    exc_info: bool = False,
) -> None:
    context = {
        "timestamp": timestamp,
        "request_id": request_id,
        "reason": reason,
        "headers": dict(request.headers),
        "body_preview": body.decode("utf-8", errors="replace")[:BODY_PREVIEW_CHARS],
    }
    if exc_info:
        Log.error("Request failed", exc_info=True, **context)
    else:
        Log.warning("Request rejected", **context)


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def create_app(
    settings: Settings | None = None,
    store: RecordStore | None = None,
) -> FastAPI:
    """Build the API. Without an injected store, DynamoDB is wired at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "store", None) is None:
            config = settings or Settings()
            Log.configure(config.log_level)
            app.state.store = DynamoDBRecordStore.from_settings(config)
            Log.info("Record store ready", table_name=config.table_name)
        yield

    app = FastAPI(title="Text Processor API", version="1.0.0", lifespan=lifespan)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.post(
        "/process-text",
        response_model=ProcessResponse,
        responses={
            400: {"model": ValidationErrorResponse},
            500: {"model": InternalErrorResponse},
        },
    )
    async def process_text(
        request: Request,
        store: RecordStore = Depends(get_store),
    ):
        request_id = _request_id(request)
        timestamp = _utc_timestamp()
        body = b""
        try:
            body = await request.body()
            analysis = validate_and_analyze(
                body,
                request.headers.get("content-type"),
                base64_encoded=_is_base64(request),
            )

            record = ProcessedTextRecord(
                id=str(uuid.uuid4()),
                text_content=analysis.text_content,
                word_count=analysis.word_count,
                line_count=analysis.line_count,
                processed_at=timestamp,
            )
            await run_in_threadpool(store.put, record)
        except TextValidationError as exc:
            _log_failure(exc.message, request, body, request_id, timestamp)
            response = ValidationErrorResponse(message=exc.message)
            return _respond(400, response.model_dump(by_alias=True), request_id)
        except Exception as exc:
            _log_failure(
                str(exc), request, body, request_id, timestamp, exc_info=True
            )
            response = InternalErrorResponse(
                message="Error processing text",
                error=str(exc),
                request_id=request_id,
            )
            return _respond(500, response.model_dump(by_alias=True), request_id)

        response = ProcessResponse(
            message="Text processed successfully",
            processing_id=record.id,
            word_count=record.word_count,
            line_count=record.line_count,
        )
        return _respond(200, response.model_dump(by_alias=True), request_id)

    return app


app = create_app()
