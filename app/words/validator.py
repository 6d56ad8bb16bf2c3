from app.importing.validation import FieldChecker, RecordValidator
from app.words.models import Difficulty, WordType

DIFFICULTIES = [d.value for d in Difficulty]
WORD_TYPES = [t.value for t in WordType]


class WordValidator(RecordValidator):
    def check(self, checker: FieldChecker) -> None:
        checker.require_text("word", "Word")
        checker.require_choice("difficulty", "Difficulty", DIFFICULTIES)
        checker.require_text("language", "Language")
        checker.require_list("type", "Type", WORD_TYPES)

        checker.optional_integer("seen", "Seen")
        checker.optional_text("definition", "Definition")
        checker.optional_text("IPA", "IPA")
        checker.optional_text("img", "Img")
        checker.optional_list("examples", "Examples")
        checker.optional_list("sinonyms", "Sinonyms")
        checker.optional_list("codeSwitching", "CodeSwitching")
        checker.optional_object("spanish", "Spanish")

        checker.warn_if_longer("word", "Word", 100)
        checker.warn_if_longer("definition", "Definition", 1000)
