from app.importing.validation import FieldChecker, RecordValidator
from app.lectures.models import Level

LEVELS = [level.value for level in Level]
MAX_CONTENT_LENGTH = 10_000


class LectureValidator(RecordValidator):
    def check(self, checker: FieldChecker) -> None:
        checker.require_text("content", "Content")
        checker.require_choice("level", "Level", LEVELS)
        checker.require_text("language", "Language")
        checker.require_text("typeWrite", "TypeWrite")

        checker.optional_integer("time", "Time")
        # urlAudio and img may be empty or null
        checker.optional_text("urlAudio", "UrlAudio", nullable=True)
        checker.optional_text("img", "Img", nullable=True)

        checker.warn_if_longer("content", "Content", MAX_CONTENT_LENGTH)
