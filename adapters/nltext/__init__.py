from .converter import NLTextConverter
from .meaning_resolver import MeaningResolver, dict_name, lemmas
from .models import (
    NLComplexToken,
    NLEntityMeaning,
    NLMeaning,
    NLSenseMeaning,
    NLSentence,
    NLText,
    NLToken,
    NLUnsupportedMeaning,
)
from .reconciler import SpanReconciler

__all__ = [
    "MeaningResolver",
    "NLComplexToken",
    "NLEntityMeaning",
    "NLMeaning",
    "NLSenseMeaning",
    "NLSentence",
    "NLText",
    "NLTextConverter",
    "NLToken",
    "NLUnsupportedMeaning",
    "SpanReconciler",
    "dict_name",
    "lemmas",
]
