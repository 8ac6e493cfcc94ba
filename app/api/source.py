# app/api/source.py
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from fastapi.concurrency import run_in_threadpool

from app.config import settings
from app.models import DatasetMetadata, ErrorMessage, SourceRequest
from etl.exceptions import InputError
from etl.fetcher import fetch_json
from etl.schema_infer import profile_records

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)

MISSING_URL_MESSAGE = "API URL is required"
NOT_ARRAY_MESSAGE = "API did not return an array of data"
FAILED_MESSAGE = "Failed to fetch or process API data"


def _message(status_code: int, message: str, error: str = None) -> JSONResponse:
    body = ErrorMessage(message=message, error=error).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


async def _read_api_url(request: Request):
    try:
        payload = await request.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    try:
        return SourceRequest.model_validate(payload).apiUrl
    except ValidationError:
        return None


def extract_metadata(api_url: str) -> DatasetMetadata:
    data = fetch_json(api_url, timeout=settings.fetch_timeout)
    if not isinstance(data, list):
        raise InputError(NOT_ARRAY_MESSAGE)
    metadata = profile_records(api_url, data)
    logger.info("profiled %s: %d rows, %d columns", api_url,
                metadata["dataset"]["row_count"], metadata["dataset"]["column_count"])
    return DatasetMetadata(**metadata)


@router.post(
    "/source",
    response_model=DatasetMetadata,
    responses={400: {"model": ErrorMessage}, 500: {"model": ErrorMessage}},
)
async def api_source(request: Request):
    api_url = await _read_api_url(request)
    if not api_url:
        return _message(400, MISSING_URL_MESSAGE)

    try:
        # requests is blocking, keep it off the event loop
        return await run_in_threadpool(extract_metadata, api_url)
    except InputError as exc:
        return _message(exc.status_code, exc.message)
    except Exception as exc:
        logger.error("Error fetching or processing API data: %s", exc)
        return _message(500, FAILED_MESSAGE, error=str(exc))
