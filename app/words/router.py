from typing import Annotated, Literal

from fastapi import APIRouter, Query, UploadFile

from app.dependencies import APIKey, ImportServiceDep, WordServiceDep
from app.importing.payload import build_config
from app.importing.registry import EntityKind
from app.importing.schemas import (
    MAX_BATCH_SIZE,
    MIN_BATCH_SIZE,
    DuplicateStrategy,
    ImportResult,
    ValidationReport,
)
from app.words.schemas import WordCreate, WordResponse

router = APIRouter()


@router.post("/", status_code=201, response_model=WordResponse)
async def create_word(
    data: WordCreate,
    service: WordServiceDep,
    _api_key: APIKey,
) -> WordResponse:
    return await service.create(data)


@router.get("/", response_model=list[WordResponse])
async def list_words(
    service: WordServiceDep,
    _api_key: APIKey,
    limit: Annotated[int, Query(ge=1, le=500)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[WordResponse]:
    return await service.list_words(limit=limit, offset=offset)


@router.get("/export")
async def export_words(
    service: WordServiceDep,
    _api_key: APIKey,
) -> dict:
    return await service.export()


@router.post(
    "/import",
    response_model=ImportResult | ValidationReport,
    response_model_exclude_none=True,
)
async def import_words(
    file: UploadFile,
    service: ImportServiceDep,
    _api_key: APIKey,
    duplicate_strategy: Annotated[
        DuplicateStrategy, Query(alias="duplicateStrategy")
    ] = DuplicateStrategy.skip,
    validate_only: Annotated[Literal["true", "false"], Query(alias="validateOnly")] = "false",
    batch_size: Annotated[
        int | None, Query(alias="batchSize", ge=MIN_BATCH_SIZE, le=MAX_BATCH_SIZE)
    ] = None,
) -> ImportResult | ValidationReport:
    config = build_config(duplicate_strategy, validate_only, batch_size)
    content = await file.read()
    return await service.import_file(
        EntityKind.word, content, config, file.filename or "words.json"
    )


@router.get("/{word_id}", response_model=WordResponse)
async def get_word(
    word_id: str,
    service: WordServiceDep,
    _api_key: APIKey,
) -> WordResponse:
    return await service.get_by_id(word_id)
