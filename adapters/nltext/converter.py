"""
Adapter: NLTextConverter
Implementuje port NLTextToSemText.

  NLText → SemText(locale z języka tekstu, tekst, zdania z SpanReconciler)

Zdania bez offsetów są pomijane; błąd w zdaniu jest logowany i zdanie
pominięte. Konwersja jest stratna, ale nigdy nie rzuca.
"""
from __future__ import annotations

import logging
from typing import Optional

from contracts import ROOT_LOCALE, Meaning, SemText, Sentence, language_tag
from ports.url_mapper import IdUrlMapper

from .meaning_resolver import MeaningResolver
from .models import NLMeaning, NLText
from .reconciler import SpanReconciler

logger = logging.getLogger("semtext_nltext.nltext_converter")


class NLTextConverter:
    """
    Konwerter NLText → SemText.
    Domyślny mapper zapisuje numeryczne id bez prefiksów, np. "12345".
    """

    def __init__(
        self,
        url_mapper: Optional[IdUrlMapper] = None,
        reconciler: Optional[SpanReconciler] = None,
    ) -> None:
        self._reconciler = reconciler or SpanReconciler(MeaningResolver(url_mapper))

    @property
    def url_mapper(self) -> IdUrlMapper:
        return self._reconciler.resolver.url_mapper

    # ── NLTextToSemText protocol ──────────────────────────────────────────────

    def semtext(self, nltext: Optional[NLText], reviewed: bool = False) -> SemText:
        if nltext is None:
            logger.warning("Found null NLText while converting to SemText, returning empty SemText")
            return SemText()

        if nltext.language is None:
            logger.warning("Found null language in NLText %r, using root locale", nltext.text)
            locale = ROOT_LOCALE
        else:
            locale = language_tag(nltext.language)

        sentences: list[Sentence] = []
        for position, nl_sentence in enumerate(nltext.sentences or ()):
            if not nl_sentence.has_offsets:
                logger.warning("Sentence %d has no offsets, skipping it", position)
                continue
            try:
                sentences.append(self._reconciler.sentence(nl_sentence, locale, reviewed))
            except Exception:
                logger.exception("Error while converting sentence %d, skipping it", position)

        return SemText(locale=locale, text=nltext.text or "", sentences=sentences)

    def semtext_meaning(self, meaning: Optional[NLMeaning], locale: str) -> Meaning:
        return self._reconciler.resolver.semtext_meaning(meaning, locale)
