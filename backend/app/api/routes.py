# backend/app/api/routes.py
import datetime
import logging

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from backend.app.core.errors import ExternalApiError, InvalidDate
from backend.app.schemas.diary import DiaryRead
from backend.app.services.diary_service import DiaryService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["diary"])

DATE_RANGE_NOTE = "Dates from 1900-01-01 up to the current date are accepted."
EXAMPLE_DATE = "2024-05-05"

# The diary text is sent as the raw request body
TEXT_BODY = {
    "requestBody": {
        "required": True,
        "content": {"text/plain": {"schema": {"type": "string", "example": "일기 내용입니다."}}},
    }
}


def get_diary_service(request: Request) -> DiaryService:
    return request.app.state.diary_service


async def read_text_body(request: Request) -> str:
    body = await request.body()
    if not body:
        raise HTTPException(status_code=400, detail="Diary text is required in the request body")
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Diary text must be UTF-8 encoded")


@router.post(
    "/create/diary",
    summary="Write a diary entry together with that day's weather",
    description=(
        f"{DATE_RANGE_NOTE} Past days without stored weather get a 'NO DATA' placeholder."
    ),
    openapi_extra=TEXT_BODY,
)
def create_diary(
    date: datetime.date = Query(..., description="Diary date", examples=[EXAMPLE_DATE]),
    text: str = Depends(read_text_body),
    service: DiaryService = Depends(get_diary_service),
) -> None:
    service.create_diary(date, text)


@router.get(
    "/read/diary",
    response_model=list[DiaryRead],
    summary="All diary entries written on a date",
    description=DATE_RANGE_NOTE,
)
def read_diary(
    date: datetime.date = Query(..., description="Date to read", examples=[EXAMPLE_DATE]),
    service: DiaryService = Depends(get_diary_service),
):
    return service.read_diary(date)


@router.get(
    "/read/diaries",
    response_model=list[DiaryRead],
    summary="All diary entries between two dates, both included",
    description=DATE_RANGE_NOTE,
)
def read_diaries(
    start_date: datetime.date = Query(..., alias="startDate", description="First day of the range", examples=[EXAMPLE_DATE]),
    end_date: datetime.date = Query(..., alias="endDate", description="Last day of the range", examples=[EXAMPLE_DATE]),
    service: DiaryService = Depends(get_diary_service),
):
    return service.read_diaries(start_date, end_date)


@router.put(
    "/update/diary",
    summary="Replace the text of the first diary entry written on a date",
    description=DATE_RANGE_NOTE,
    openapi_extra=TEXT_BODY,
)
def update_diary(
    date: datetime.date = Query(..., description="Date to update", examples=[EXAMPLE_DATE]),
    text: str = Depends(read_text_body),
    service: DiaryService = Depends(get_diary_service),
) -> None:
    service.update_diary(date, text)


@router.delete(
    "/delete/diary",
    summary="Delete every diary entry written on a date",
    description=DATE_RANGE_NOTE,
)
def delete_diary(
    date: datetime.date = Query(..., description="Date to delete", examples=[EXAMPLE_DATE]),
    service: DiaryService = Depends(get_diary_service),
) -> None:
    service.delete_diary(date)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(InvalidDate)
    async def invalid_date_handler(request: Request, exc: InvalidDate):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ExternalApiError)
    async def external_api_handler(request: Request, exc: ExternalApiError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=502, content={"detail": str(exc)})
