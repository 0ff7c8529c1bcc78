"""
nltext/meaning_resolver.py — konwersja pojedynczego znaczenia NLText → Meaning.

Sens    → CONCEPT, id z concept_id, nazwa = lemat + synonimy, opis = glosy
Encja   → ENTITY,  id z object_id,  nazwa = URL encji,      opis = description
Inne    → ValueError (resolve) / Meaning() + ERROR w logu (semtext_meaning)

Każde znaczenie dostaje metadane NLMeaningMetadata w przestrzeni "nltext".
"""
from __future__ import annotations

import logging
from typing import Optional

from adapters.url_mapper import UrlMapper
from contracts import (
    NLTEXT_NAMESPACE,
    LocalizedDict,
    Meaning,
    MeaningKind,
    NLMeaningMetadata,
    language_tag,
)
from ports.url_mapper import IdUrlMapper

from .models import NLEntityMeaning, NLMeaning, NLSenseMeaning

logger = logging.getLogger("semtext_nltext.meaning_resolver")


# ─────────────────────────── Sanitizers ──────────────────────────────────

def sanitize_string(value: Optional[str], context: str) -> str:
    """None / "" → "" z ostrzeżeniem w logu."""
    if value is None:
        logger.warning("%s -- Found null string", context)
        return ""
    if value == "":
        logger.warning("%s -- Found empty string", context)
        return ""
    return value


def sanitize_strings(values, context: str) -> list[str]:
    """Usuwa None z listy napisów; None zamiast listy → []."""
    if values is None:
        logger.warning("%s -- Found null strings", context)
        return []
    result = []
    for v in values:
        if v is None:
            logger.warning("%s -- Found null string, skipping it", context)
        else:
            result.append(v)
    return result


def string_to_dict(value: Optional[str], locale: str, context: str) -> LocalizedDict:
    sanitized = sanitize_string(value, context)
    if not sanitized:
        return LocalizedDict()
    return LocalizedDict.of(locale, sanitized)


def gloss_to_dict(sense: NLSenseMeaning, context: str) -> LocalizedDict:
    """Mapa glos (tag językowy → glosa) jako LocalizedDict; glosy None pomijane."""
    glosses = sense.gloss_map
    if glosses is None:
        logger.warning("%s -- Found null gloss map, returning empty dict", context)
        return LocalizedDict()
    pairs = []
    for tag, gloss in glosses.items():
        if not isinstance(tag, str):
            logger.warning("%s -- Found invalid language tag %r in gloss map, returning empty dict", context, tag)
            return LocalizedDict()
        if gloss is not None:
            pairs.append((tag, gloss))
    return LocalizedDict.from_pairs(pairs)


# ─────────────────────────── Lemmas ──────────────────────────────────────

def _synonyms(sense: NLSenseMeaning, lemma: Optional[str]) -> list[str]:
    result = []
    for syn in sense.synonymous_lemmas or ():
        if syn is None:
            logger.warning("Found null synonym in NLMeaning!")
        elif syn != lemma:
            result.append(syn)
    return result


def lemmas(sense: NLSenseMeaning) -> list[str]:
    """Lemat znaczenia (jeśli niepusty) i jego synonimy różne od lematu."""
    if sense is None:
        raise ValueError("Cannot extract lemmas from a null meaning")
    lemma = sanitize_string(sense.lemma, "Found invalid lemma in NLSenseMeaning")
    result = [lemma] if lemma else []
    result.extend(_synonyms(sense, lemma))
    return result


def dict_name(sense: Optional[NLSenseMeaning], locale: str) -> LocalizedDict:
    """
    Nazwa znaczenia: lemat + synonimy pod danym locale.
    Nigdy nie rzuca: przy problemach zwraca słownik z mniejszą ilością informacji.
    """
    if sense is None:
        logger.warning("Found null NLMeaning while extracting dict, returning empty dict")
        return LocalizedDict()

    names: list[str] = []
    if sense.lemma is None:
        logger.warning("Found null lemma in NLMeaning while extracting dict")
    elif sense.lemma == "":
        logger.warning("Found empty lemma in NLMeaning while extracting dict")
    else:
        names.append(sense.lemma)
    names.extend(_synonyms(sense, sense.lemma))

    if not names:
        logger.warning("Found no valid lemmas to use, returning empty dict")
        return LocalizedDict()
    return LocalizedDict.of(locale, *names)


# ─────────────────────────── Resolver ────────────────────────────────────

class MeaningResolver:
    """Konwertuje znaczenia NLText na Meaning, używając wstrzykniętego mappera id → URL."""

    def __init__(self, url_mapper: Optional[IdUrlMapper] = None) -> None:
        self._url_mapper = url_mapper or UrlMapper()

    @property
    def url_mapper(self) -> IdUrlMapper:
        return self._url_mapper

    def resolve(self, meaning: NLMeaning, locale: str) -> Meaning:
        """Rzuca ValueError dla nieobsługiwanego rodzaju znaczenia."""
        locale = language_tag(locale)
        url = ""

        if isinstance(meaning, NLSenseMeaning):
            kind = MeaningKind.CONCEPT
            if meaning.concept_id is not None:
                url = self._url_mapper.concept_id_to_url(meaning.concept_id)
            name = dict_name(meaning, locale)
            description = gloss_to_dict(meaning, "Error while extracting description from NLSenseMeaning")

        elif isinstance(meaning, NLEntityMeaning):
            kind = MeaningKind.ENTITY
            if meaning.object_id is not None:
                url = self._url_mapper.entity_id_to_url(meaning.object_id)
            name = string_to_dict(url, locale, "Error while extracting name from NLEntityMeaning")
            description = string_to_dict(
                meaning.description, locale, "Error while extracting description from NLEntityMeaning"
            )

        else:
            type_name = getattr(meaning, "type_name", "") or type(meaning).__name__
            raise ValueError(f"Found an unsupported meaning type: {type_name}")

        metadata = NLMeaningMetadata(
            lemma=sanitize_string(meaning.lemma, "invalid lemma in NLMeaning"),
            summary=sanitize_string(meaning.summary, "invalid summary in NLMeaning"),
        )
        return Meaning(
            id=url,
            kind=kind,
            probability=meaning.probability,
            name=name,
            description=description,
            metadata={NLTEXT_NAMESPACE: metadata},
        )

    def semtext_meaning(self, meaning: Optional[NLMeaning], locale: str) -> Meaning:
        """Jak resolve(), ale nigdy nie rzuca: przy błędzie zwraca Meaning()."""
        if meaning is None:
            logger.warning("Found null NLMeaning during conversion, returning empty Meaning()")
            return Meaning()
        try:
            return self.resolve(meaning, locale)
        except Exception:
            logger.exception("Error while converting NLMeaning to SemText meaning, returning empty Meaning()")
            return Meaning()
