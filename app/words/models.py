from enum import StrEnum


class Difficulty(StrEnum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


class WordType(StrEnum):
    noun = "noun"
    verb = "verb"
    adjective = "adjective"
    adverb = "adverb"
    personal_pronoun = "personal pronoun"
    possessive_pronoun = "possessive pronoun"
    preposition = "preposition"
    conjunction = "conjunction"
    determiner = "determiner"
    article = "article"
    quantifier = "quantifier"
    interjection = "interjection"
    auxiliary_verb = "auxiliary verb"
    modal_verb = "modal verb"
    infinitive = "infinitive"
    participle = "participle"
    gerund = "gerund"
    other = "other"
    phrasal_verb = "phrasal verb"
