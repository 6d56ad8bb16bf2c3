from typing import Annotated

from fastapi import Depends

from app.auth import verify_token
from app.database import get_db
from app.expressions.importer import ExpressionImporter
from app.expressions.repository import ExpressionRepository
from app.expressions.service import ExpressionService
from app.importing.registry import ImporterRegistry
from app.importing.service import ImportService
from app.lectures.importer import LectureImporter
from app.lectures.repository import LectureRepository
from app.lectures.service import LectureService
from app.words.importer import WordImporter
from app.words.repository import WordRepository
from app.words.service import WordService

APIKey = Annotated[dict, Depends(verify_token)]


def get_word_repo() -> WordRepository:
    return WordRepository(get_db())


def get_word_service() -> WordService:
    return WordService(get_word_repo())


def get_lecture_repo() -> LectureRepository:
    return LectureRepository(get_db())


def get_lecture_service() -> LectureService:
    return LectureService(get_lecture_repo())


def get_expression_repo() -> ExpressionRepository:
    return ExpressionRepository(get_db())


def get_expression_service() -> ExpressionService:
    return ExpressionService(get_expression_repo())


def get_importer_registry() -> ImporterRegistry:
    return ImporterRegistry(
        [
            WordImporter(get_word_repo()),
            LectureImporter(get_lecture_repo()),
            ExpressionImporter(get_expression_repo()),
        ]
    )


def get_import_service() -> ImportService:
    return ImportService(get_importer_registry())


WordServiceDep = Annotated[WordService, Depends(get_word_service)]
LectureServiceDep = Annotated[LectureService, Depends(get_lecture_service)]
ExpressionServiceDep = Annotated[ExpressionService, Depends(get_expression_service)]
ImportServiceDep = Annotated[ImportService, Depends(get_import_service)]
