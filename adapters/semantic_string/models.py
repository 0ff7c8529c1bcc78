"""
semantic_string/models.py — format "semantic string" backendu indeksującego.

SemanticString
  └── ComplexConcept[]
        └── SemanticTerm[] (offset, text)
              ├── ConceptTerm[]  (id konceptu, waga)
              ├── InstanceTerm[] (id encji, waga)
              └── StringTerm[]   (napis do indeksowania, waga)

Format zewnętrzny jest słabo wyspecyfikowany: każde pole może być puste (None).
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

# Waga referencji, gdy brak jej w danych
DEFAULT_WEIGHT = 1.0

# Sztucznie zawyżona waga wybranego znaczenia: format nie ma flagi "wybrane"
SELECTED_MEANING_WEIGHT = 5.0


class ConceptTerm(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: Optional[int] = None
    weight: Optional[float] = None


class InstanceTerm(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: Optional[int] = None
    weight: Optional[float] = None


class StringTerm(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: Optional[str] = None
    weight: Optional[float] = None


class SemanticTerm(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: Optional[str] = None
    offset: Optional[int] = None
    concept_terms: Optional[list[ConceptTerm]] = None
    instance_terms: Optional[list[InstanceTerm]] = None
    string_terms: Optional[list[StringTerm]] = None


class ComplexConcept(BaseModel):
    model_config = ConfigDict(frozen=True)

    terms: Optional[list[SemanticTerm]] = None


class SemanticString(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: Optional[str] = None
    complex_concepts: Optional[list[ComplexConcept]] = None
