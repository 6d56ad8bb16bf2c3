from enum import StrEnum


class ExpressionType(StrEnum):
    idiom = "idiom"
    phrase = "phrase"
    collocation = "collocation"
    slang = "slang"
    formal = "formal"
    informal = "informal"
