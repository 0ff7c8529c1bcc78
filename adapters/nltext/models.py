"""
nltext/models.py — model wejściowy: tekst anotowany przez pipeline NLP.

Układ "arena": zdanie posiada swoje tokeny i tokeny złożone (multi-word,
named entity); przynależność wyrażona jest listami indeksów, bez
wzajemnych referencji obiektów.

Offsety tokenów są względne wobec początku zdania, offsety zdań względne
wobec początku tekstu. Brak offsetu = None.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Union

from contracts import MeaningKind


# ─────────────────────────── Meanings ────────────────────────────────────

@dataclass(frozen=True, eq=False)
class NLSenseMeaning:
    """Znaczenie słownikowe (sens) wskazujące na koncept."""
    lemma: Optional[str] = None
    summary: Optional[str] = None
    probability: float = 0.0
    concept_id: Optional[int] = None
    synonymous_lemmas: Optional[tuple[Optional[str], ...]] = None
    gloss_map: Optional[dict[str, Optional[str]]] = None   # tag językowy → glosa
    variant: Literal["sense"] = "sense"


@dataclass(frozen=True, eq=False)
class NLEntityMeaning:
    """Znaczenie wskazujące na encję (osoba, miejsce, organizacja, …)."""
    lemma: Optional[str] = None
    summary: Optional[str] = None
    probability: float = 0.0
    object_id: Optional[int] = None
    description: Optional[str] = None
    variant: Literal["entity"] = "entity"


@dataclass(frozen=True, eq=False)
class NLUnsupportedMeaning:
    """Każdy inny rodzaj znaczenia produkowany przez pipeline, nieobsługiwany."""
    type_name: str = ""
    lemma: Optional[str] = None
    summary: Optional[str] = None
    probability: float = 0.0
    variant: Literal["unsupported"] = "unsupported"


NLMeaning = Union[NLSenseMeaning, NLEntityMeaning, NLUnsupportedMeaning]


# ─────────────────────────── Tokens ──────────────────────────────────────

@dataclass(frozen=True, eq=False)
class NLToken:
    text: Optional[str] = ""
    start_offset: Optional[int] = None      # względem początku zdania
    end_offset: Optional[int] = None
    meanings: tuple[NLMeaning, ...] = ()
    selected_meaning: Optional[NLMeaning] = None
    complex_token_ids: tuple[int, ...] = () # indeksy w NLSentence.complex_tokens
    derived_stem: Optional[str] = None
    derived_lemmas: tuple[Optional[str], ...] = ()

    @property
    def has_offsets(self) -> bool:
        return self.start_offset is not None and self.end_offset is not None


@dataclass(frozen=True, eq=False)
class NLComplexToken:
    """
    Grupa kolejnych tokenów: multi-word (kind=CONCEPT) albo named entity
    (kind=ENTITY). Inne rodzaje grup mają kind=UNKNOWN.
    Zakres tekstu wynika z pierwszego i ostatniego tokenu grupy.
    """
    kind: MeaningKind
    token_indices: tuple[int, ...] = ()
    meanings: tuple[NLMeaning, ...] = ()
    selected_meaning: Optional[NLMeaning] = None
    derived_lemmas: tuple[Optional[str], ...] = ()

    @classmethod
    def multi_word(cls, token_indices, meanings=(), selected_meaning=None, derived_lemmas=()) -> NLComplexToken:
        return cls(
            kind=MeaningKind.CONCEPT,
            token_indices=tuple(token_indices),
            meanings=tuple(meanings),
            selected_meaning=selected_meaning,
            derived_lemmas=tuple(derived_lemmas),
        )

    @classmethod
    def named_entity(cls, token_indices, meanings=(), selected_meaning=None, derived_lemmas=()) -> NLComplexToken:
        return cls(
            kind=MeaningKind.ENTITY,
            token_indices=tuple(token_indices),
            meanings=tuple(meanings),
            selected_meaning=selected_meaning,
            derived_lemmas=tuple(derived_lemmas),
        )

    @property
    def size(self) -> int:
        return len(self.token_indices)

    @property
    def is_multi_word(self) -> bool:
        return self.kind == MeaningKind.CONCEPT

    @property
    def is_named_entity(self) -> bool:
        return self.kind == MeaningKind.ENTITY


# ─────────────────────────── Sentence / Text ─────────────────────────────

@dataclass(frozen=True, eq=False)
class NLSentence:
    text: str = ""
    start_offset: Optional[int] = None      # względem początku tekstu
    end_offset: Optional[int] = None
    tokens: tuple[NLToken, ...] = ()
    complex_tokens: tuple[NLComplexToken, ...] = ()

    @property
    def has_offsets(self) -> bool:
        return self.start_offset is not None and self.end_offset is not None

    def groups_of(self, token_index: int) -> list[NLComplexToken]:
        """Tokeny złożone, do których należy token o danym indeksie (w kolejności indeksów)."""
        token = self.tokens[token_index]
        return [self.complex_tokens[i] for i in sorted(token.complex_token_ids)]

    def is_in_group(self, token_index: int, group: NLComplexToken) -> bool:
        return any(g is group for g in self.groups_of(token_index))


@dataclass(frozen=True, eq=False)
class NLText:
    text: str = ""
    language: Optional[str] = None          # tag językowy, None = nieznany
    sentences: tuple[NLSentence, ...] = field(default_factory=tuple)
