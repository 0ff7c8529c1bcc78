from .converter import SemanticStringConverter
from .models import (
    DEFAULT_WEIGHT,
    SELECTED_MEANING_WEIGHT,
    ComplexConcept,
    ConceptTerm,
    InstanceTerm,
    SemanticString,
    SemanticTerm,
    StringTerm,
)

__all__ = [
    "DEFAULT_WEIGHT",
    "SELECTED_MEANING_WEIGHT",
    "ComplexConcept",
    "ConceptTerm",
    "InstanceTerm",
    "SemanticString",
    "SemanticTerm",
    "SemanticStringConverter",
    "StringTerm",
]
