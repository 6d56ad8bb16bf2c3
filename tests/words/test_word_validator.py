import pytest

from app.words.validator import WordValidator

validator = WordValidator()


def test_accepts_minimal_word(make_word):
    result = validator.validate(make_word("cat"), 0)

    assert result.is_valid
    assert result.errors == []
    assert result.warnings == []


def test_accepts_full_word(make_word):
    record = make_word(
        "run",
        type=["verb", "phrasal verb"],
        examples=["I run every day"],
        sinonyms=["jog"],
        codeSwitching=["correr"],
        IPA="rʌn",
        img="https://example.com/run.png",
        seen=3,
        spanish={"word": "correr", "definition": "Moverse rápido"},
    )

    assert validator.validate(record, 0).is_valid


def test_reports_every_missing_required_field():
    result = validator.validate({}, 0)

    assert not result.is_valid
    assert result.errors == [
        "Word is required and must be a non-empty string",
        "Difficulty is required and must be one of: easy, medium, hard",
        "Language is required and must be a non-empty string",
        "Type is required and must be a non-empty array",
    ]


@pytest.mark.parametrize("word", ["", "   ", 7, None])
def test_rejects_blank_or_non_string_word(make_word, word):
    result = validator.validate(make_word(word), 0)

    assert result.errors == ["Word is required and must be a non-empty string"]


def test_rejects_unknown_word_type(make_word):
    result = validator.validate(make_word(type=["noun", "gizmo"]), 0)

    assert not result.is_valid
    assert result.errors[0].startswith("Type contains invalid values: gizmo.")


def test_rejects_empty_type_list(make_word):
    result = validator.validate(make_word(type=[]), 0)

    assert result.errors == ["Type is required and must be a non-empty array"]


@pytest.mark.parametrize(
    ("overrides", "error"),
    [
        ({"seen": -1}, "Seen must be a non-negative integer"),
        ({"seen": "3"}, "Seen must be a non-negative integer"),
        ({"seen": True}, "Seen must be a non-negative integer"),
        ({"seen": 2.5}, "Seen must be a non-negative integer"),
        ({"definition": 12}, "Definition must be a string"),
        ({"IPA": ["k"]}, "IPA must be a string"),
        ({"examples": "one"}, "Examples must be an array"),
        ({"examples": [1, 2]}, "Examples must be an array of strings"),
        ({"sinonyms": ["jog", None]}, "Sinonyms must be an array of strings"),
        ({"codeSwitching": [{"es": "gato"}]}, "CodeSwitching must be an array of strings"),
        ({"sinonyms": {}}, "Sinonyms must be an array"),
        ({"codeSwitching": "x"}, "CodeSwitching must be an array"),
        ({"spanish": "gato"}, "Spanish must be an object"),
    ],
)
def test_rejects_badly_typed_optional_fields(make_word, overrides, error):
    result = validator.validate(make_word(**overrides), 0)

    assert result.errors == [error]


def test_long_fields_only_warn(make_word):
    record = make_word("w" * 101, definition="d" * 1001)

    result = validator.validate(record, 0)

    assert result.is_valid
    assert result.warnings == [
        "Word is very long (>100 characters)",
        "Definition is very long (>1,000 characters)",
    ]


def test_non_object_record_is_invalid():
    result = validator.validate(["cat"], 3)

    assert result.errors == ["Record must be an object"]
