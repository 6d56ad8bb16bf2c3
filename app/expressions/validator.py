from app.expressions.models import ExpressionType
from app.importing.validation import FieldChecker, RecordValidator
from app.words.models import Difficulty

DIFFICULTIES = [d.value for d in Difficulty]
EXPRESSION_TYPES = [t.value for t in ExpressionType]


class ExpressionValidator(RecordValidator):
    def check(self, checker: FieldChecker) -> None:
        checker.require_text("expression", "Expression")
        checker.require_text("language", "Language")

        checker.optional_text("definition", "Definition")
        checker.optional_choice("difficulty", "Difficulty", DIFFICULTIES)
        checker.optional_list("type", "Type", EXPRESSION_TYPES)
        checker.optional_list("examples", "Examples")
        checker.optional_text("context", "Context", nullable=True)
        checker.optional_text("img", "Img", nullable=True)
        checker.optional_object("spanish", "Spanish")

        checker.warn_if_longer("expression", "Expression", 200)
        checker.warn_if_longer("context", "Context", 500)
        checker.warn_if_longer("definition", "Definition", 1000)
