"""
Adapter: SemanticStringConverter
Implementuje port SemanticStringBridge.

  semtext():          SemanticString → SemText (jedno zdanie na cały tekst)
  semantic_string():  SemText → SemanticString (jeden ComplexConcept na term)

Konwersja jest stratna w obie strony: wybrane znaczenie przenoszone jest
wyłącznie jako najwyższa waga (SELECTED_MEANING_WEIGHT).

Straty przy przejściu SemText → SemanticString → SemText:
  - term bez wybranego znaczenia może wrócić z wyborem: kandydaci trafiają
    do formatu z własnymi wagami, a Disambiguator wybiera jedynego albo
    wyraźnie prowadzącego (status SELECTED/REVIEWED zamiast
    TO_DISAMBIGUATE/NOT_SURE)
  - term, którego wszystkie znaczenia mają puste id (np. placeholder
    multi-wordu), nie niesie nic do zindeksowania poza napisami i znika
  - locale zawsze wraca jako root, zdania scalane są w jedno,
    nazwy, opisy i metadane znaczeń nie są przenoszone
"""
from __future__ import annotations

import logging
from typing import Optional

from adapters.disambiguator import MarginDisambiguator
from adapters.url_mapper import UrlMapper
from contracts import (
    NLTEXT_NAMESPACE,
    ROOT_LOCALE,
    Meaning,
    MeaningKind,
    MeaningStatus,
    NLTermMetadata,
    SemText,
    Sentence,
    Term,
)
from ports.disambiguator import Disambiguator
from ports.url_mapper import IdUrlMapper

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

logger = logging.getLogger("semtext_nltext.semantic_string_converter")


class SemanticStringConverter:
    """
    Konwerter SemanticString ↔ SemText.
    Domyślnie: mapper bez prefiksów i MarginDisambiguator.
    """

    def __init__(
        self,
        url_mapper: Optional[IdUrlMapper] = None,
        disambiguator: Optional[Disambiguator] = None,
    ) -> None:
        self._url_mapper = url_mapper or UrlMapper()
        self._disambiguator = disambiguator or MarginDisambiguator()

    @property
    def url_mapper(self) -> IdUrlMapper:
        return self._url_mapper

    @property
    def disambiguator(self) -> Disambiguator:
        return self._disambiguator

    # ── SemanticString → SemText ──────────────────────────────────────────────

    def semtext(self, semantic_string: Optional[SemanticString], reviewed: bool = False) -> SemText:
        if semantic_string is None:
            logger.warning("Found null semantic string, returning empty SemText")
            return SemText()

        text = semantic_string.text or ""
        terms: list[Term] = []
        pos = 0

        for cc in semantic_string.complex_concepts or ():
            for st in cc.terms or ():
                # termy nachodzące na poprzedni są ignorowane
                if st.offset is None or st.offset < pos:
                    continue

                meanings = self._concept_meanings(st.concept_terms) + self._entity_meanings(st.instance_terms)
                if not meanings:
                    continue

                selected = self._disambiguator.disambiguate(meanings)
                end = st.offset + len(st.text or "")
                terms.append(
                    Term(
                        start=st.offset,
                        end=end,
                        meaning_status=MeaningStatus.resolve(selected is not None, reviewed),
                        selected_meaning=selected,
                        meanings=meanings,
                    )
                )
                pos = end

        return SemText(
            locale=ROOT_LOCALE,
            text=text,
            sentences=[Sentence(start=0, end=len(text), terms=terms)],
        )

    def _concept_meanings(self, concept_terms: Optional[list[ConceptTerm]]) -> list[Meaning]:
        return [
            Meaning(
                id=self._url_mapper.concept_id_to_url(ct.value),
                kind=MeaningKind.CONCEPT,
                probability=DEFAULT_WEIGHT if ct.weight is None else ct.weight,
            )
            for ct in concept_terms or ()
            if ct.value is not None
        ]

    def _entity_meanings(self, instance_terms: Optional[list[InstanceTerm]]) -> list[Meaning]:
        return [
            Meaning(
                id=self._url_mapper.entity_id_to_url(it.value),
                kind=MeaningKind.ENTITY,
                probability=DEFAULT_WEIGHT if it.weight is None else it.weight,
            )
            for it in instance_terms or ()
            if it.value is not None
        ]

    # ── SemText → SemanticString ──────────────────────────────────────────────

    def semantic_string(self, semtext: SemText) -> SemanticString:
        """Rzuca ValueError dla znaczeń, których id nie da się zamienić na liczbę."""
        complex_concepts = [
            ComplexConcept(terms=[self._semantic_term(semtext, term)])
            for term in semtext.terms()
        ]
        return SemanticString(text=semtext.text, complex_concepts=complex_concepts)

    def _semantic_term(self, semtext: SemText, term: Term) -> SemanticTerm:
        concept_terms: list[ConceptTerm] = []
        instance_terms: list[InstanceTerm] = []

        selected = term.selected_meaning
        if term.meaning_status.has_selection:
            self._add_meaning(selected, SELECTED_MEANING_WEIGHT, concept_terms, instance_terms)

        for meaning in term.meanings:
            if selected is not None and meaning.id == selected.id:
                continue
            self._add_meaning(meaning, meaning.probability, concept_terms, instance_terms)

        covered = semtext.text_of(term)
        return SemanticTerm(
            text=covered,
            offset=term.start,
            concept_terms=concept_terms,
            instance_terms=instance_terms,
            string_terms=self._string_terms(term, covered),
        )

    def _add_meaning(
        self,
        meaning: Meaning,
        weight: float,
        concept_terms: list[ConceptTerm],
        instance_terms: list[InstanceTerm],
    ) -> None:
        if meaning.kind == MeaningKind.UNKNOWN and meaning.id:
            raise ValueError(f"Found meaning of kind UNKNOWN with non-empty id: {meaning.id!r}")
        if not meaning.id:
            logger.debug("Skipping %s meaning with empty id", meaning.kind.value)
            return
        if meaning.kind == MeaningKind.CONCEPT:
            concept_terms.append(ConceptTerm(value=self._url_mapper.url_to_concept_id(meaning.id), weight=weight))
        elif meaning.kind == MeaningKind.ENTITY:
            instance_terms.append(InstanceTerm(value=self._url_mapper.url_to_entity_id(meaning.id), weight=weight))

    @staticmethod
    def _string_terms(term: Term, covered: str) -> list[StringTerm]:
        if not term.has_metadata(NLTEXT_NAMESPACE):
            logger.debug("No %s metadata for term [%d,%d), indexing covered text", NLTEXT_NAMESPACE, term.start, term.end)
            return [StringTerm(value=covered, weight=DEFAULT_WEIGHT)]

        metadata = term.get_metadata(NLTEXT_NAMESPACE)
        if isinstance(metadata, NLTermMetadata):
            strings = [*metadata.derived_lemmas, *metadata.stems]
            if strings:
                return [StringTerm(value=s, weight=DEFAULT_WEIGHT) for s in strings]
            logger.debug("Empty NLTermMetadata for term [%d,%d), indexing covered text", term.start, term.end)
        else:
            logger.debug(
                "Expected NLTermMetadata in namespace %s, found %s; indexing covered text",
                NLTEXT_NAMESPACE, type(metadata).__name__,
            )
        return [StringTerm(value=covered, weight=DEFAULT_WEIGHT)]
