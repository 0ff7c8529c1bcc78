"""
contracts.py — Jedyne źródło prawdy dla modelu SemText (tekst semantyczny).
Konwertery NLText i SemanticString produkują i konsumują WYŁĄCZNIE te typy.
Wszystkie modele są niemutowalne: każda konwersja buduje nowe drzewo.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Przestrzeń nazw metadanych dołączanych przez konwersję z NLText
NLTEXT_NAMESPACE = "nltext"

# Locale "root" (nieznany język) reprezentowany jest pustym tagiem
ROOT_LOCALE = ""


# ─────────────────────────── Helpers ─────────────────────────────────────

def language_tag(tag: Optional[str]) -> str:
    """Normalizuje tag językowy: None → root, 'it_IT' → 'it-IT'."""
    if tag is None:
        return ROOT_LOCALE
    return tag.strip().replace("_", "-")


# ─────────────────────────── Enums ───────────────────────────────────────

class MeaningKind(str, Enum):
    CONCEPT = "CONCEPT"
    ENTITY = "ENTITY"
    UNKNOWN = "UNKNOWN"


class MeaningStatus(str, Enum):
    SELECTED = "SELECTED"                # automatyczna anotacja, znaczenie wybrane
    REVIEWED = "REVIEWED"                # sprawdzone przez człowieka, znaczenie wybrane
    TO_DISAMBIGUATE = "TO_DISAMBIGUATE"  # automatyczna anotacja, brak wyboru
    NOT_SURE = "NOT_SURE"                # sprawdzone przez człowieka, brak wyboru

    @classmethod
    def resolve(cls, has_selection: bool, reviewed: bool) -> MeaningStatus:
        """Wybiera status z pary zależnej od trybu (reviewed / automatyczny)."""
        if has_selection:
            return cls.REVIEWED if reviewed else cls.SELECTED
        return cls.NOT_SURE if reviewed else cls.TO_DISAMBIGUATE

    @property
    def has_selection(self) -> bool:
        return self in (MeaningStatus.SELECTED, MeaningStatus.REVIEWED)


# ─────────────────────────── LocalizedDict ───────────────────────────────

class LocalizedDict(BaseModel):
    """Locale → jeden lub więcej napisów (nazwa, opis znaczenia)."""

    model_config = ConfigDict(frozen=True)

    strings_by_locale: dict[str, list[str]] = Field(default_factory=dict)

    @classmethod
    def of(cls, locale: str, *strings: str) -> LocalizedDict:
        if not strings:
            return cls()
        return cls(strings_by_locale={language_tag(locale): list(strings)})

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> LocalizedDict:
        """Buduje słownik z par (tag, napis); kolejne napisy dla tego samego locale są dopisywane."""
        acc: dict[str, list[str]] = {}
        for tag, string in pairs:
            acc.setdefault(language_tag(tag), []).append(string)
        return cls(strings_by_locale=acc)

    def strings(self, locale: str) -> list[str]:
        return list(self.strings_by_locale.get(language_tag(locale), []))

    def string(self, locale: str) -> str:
        """Pierwszy napis dla locale albo pusty string."""
        found = self.strings_by_locale.get(language_tag(locale))
        return found[0] if found else ""

    def locales(self) -> list[str]:
        return list(self.strings_by_locale)

    def is_empty(self) -> bool:
        return not any(self.strings_by_locale.values())


# ─────────────────────────── Metadata records ────────────────────────────

class NLMeaningMetadata(BaseModel):
    """Surowy lemat i streszczenie znaczenia NLText, do indeksowania."""

    model_config = ConfigDict(frozen=True)

    lemma: str = ""
    summary: str = ""


class NLTermMetadata(BaseModel):
    """Rdzenie i lematy pochodne słów tworzących term, do indeksowania."""

    model_config = ConfigDict(frozen=True)

    stems: list[str] = Field(default_factory=list)
    derived_lemmas: list[str] = Field(default_factory=list)


# ─────────────────────────── Meaning ─────────────────────────────────────

class Meaning(BaseModel):
    """
    Znaczenie termu: koncept (sens) albo encja.
    Meaning() to znaczenie "maksymalnie puste", zwracane zamiast błędu.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""                          # URL; "" = nieznane
    kind: MeaningKind = MeaningKind.UNKNOWN
    probability: float = Field(default=0.0, ge=0.0)
    name: LocalizedDict = Field(default_factory=LocalizedDict)
    description: LocalizedDict = Field(default_factory=LocalizedDict)
    metadata: dict[str, Any] = Field(default_factory=dict)

    def get_metadata(self, namespace: str) -> Any:
        """Zwraca metadane z danej przestrzeni nazw. Rzuca KeyError jeśli brak."""
        return self.metadata[namespace]


# ─────────────────────────── Term / Sentence / SemText ───────────────────

class Term(BaseModel):
    """Nienakładający się fragment tekstu [start, end) z przypisanymi znaczeniami."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    end: int
    meaning_status: MeaningStatus
    selected_meaning: Optional[Meaning] = None
    meanings: list[Meaning] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("meanings")
    @classmethod
    def _sort_by_probability(cls, v: list[Meaning]) -> list[Meaning]:
        # sorted() jest stabilne: remisy zachowują kolejność napotkania
        return sorted(v, key=lambda m: m.probability, reverse=True)

    @model_validator(mode="after")
    def _check_term(self) -> Term:
        if self.end < self.start:
            raise ValueError(f"Term end {self.end} precedes start {self.start}")
        if self.meaning_status.has_selection and self.selected_meaning is None:
            raise ValueError(f"Status {self.meaning_status.value} requires a selected meaning")
        if not self.meaning_status.has_selection and self.selected_meaning is not None:
            raise ValueError(f"Status {self.meaning_status.value} forbids a selected meaning")
        return self

    def has_metadata(self, namespace: str) -> bool:
        return namespace in self.metadata

    def get_metadata(self, namespace: str) -> Any:
        return self.metadata[namespace]


class Sentence(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    end: int
    terms: list[Term] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_terms(self) -> Sentence:
        if self.end < self.start:
            raise ValueError(f"Sentence end {self.end} precedes start {self.start}")
        for prev, cur in zip(self.terms, self.terms[1:]):
            if cur.start < prev.end:
                raise ValueError(
                    f"Overlapping terms [{prev.start},{prev.end}) and [{cur.start},{cur.end})"
                )
        return self


class SemText(BaseModel):
    model_config = ConfigDict(frozen=True)

    locale: str = ROOT_LOCALE
    text: str = ""
    sentences: list[Sentence] = Field(default_factory=list)

    @field_validator("locale")
    @classmethod
    def _normalize_locale(cls, v: str) -> str:
        return language_tag(v)

    def terms(self) -> list[Term]:
        """Wszystkie termy ze wszystkich zdań, w kolejności."""
        return [t for s in self.sentences for t in s.terms]

    def text_of(self, term: Term) -> str:
        """Fragment tekstu pokryty przez term."""
        return self.text[term.start:term.end]
