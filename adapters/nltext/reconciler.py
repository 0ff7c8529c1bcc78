"""
nltext/reconciler.py — uzgadnianie zakresów: tokeny + multi-wordy + named entities
jednego zdania → nienakładające się termy.

Przebieg (od lewej do prawej po indeksach tokenów):
  1. token zaczynający się przed końcem ostatniego termu → pomijany
  2. token w grupie (multi-word / named entity) → wybór zwycięzcy:
       - więcej tokenów wygrywa
       - przy remisie: zwycięzca bez wybranego znaczenia ustępuje kandydatowi
       - przy remisie: named entity z wybranym znaczeniem wypiera multi-word
     kolejne tokeny należące do zwycięzcy wyznaczają zakres termu i przesunięcie
  3. zwykły token → term, jeśli ma oba offsety i jakiekolwiek znaczenie
  4. błąd przy tokenie → WARNING w logu, token pominięty
"""
from __future__ import annotations

import logging
from typing import Optional

from contracts import (
    NLTEXT_NAMESPACE,
    Meaning,
    MeaningKind,
    MeaningStatus,
    NLMeaningMetadata,
    NLTermMetadata,
    Sentence,
    Term,
)

from .meaning_resolver import MeaningResolver, sanitize_string, sanitize_strings
from .models import NLComplexToken, NLMeaning, NLSentence, NLToken

logger = logging.getLogger("semtext_nltext.reconciler")


def pick_winner(groups: list[NLComplexToken]) -> NLComplexToken:
    """Wybiera grupę, z której powstanie term. `groups` nie może być puste."""
    if not groups:
        raise ValueError("Token should be used in complex tokens, but none found")
    winner = groups[0]
    for candidate in groups[1:]:
        if candidate.size > winner.size:
            winner = candidate
        elif candidate.size == winner.size:
            if winner.selected_meaning is None:
                winner = candidate
            elif (
                candidate.is_named_entity
                and candidate.selected_meaning is not None
                and winner.is_multi_word
            ):
                winner = candidate
    return winner


def _unique(meanings) -> list[NLMeaning]:
    """Usuwa duplikaty po tożsamości obiektu, zachowując kolejność."""
    return list({id(m): m for m in meanings}.values())


class SpanReconciler:
    def __init__(self, resolver: Optional[MeaningResolver] = None) -> None:
        self._resolver = resolver or MeaningResolver()

    @property
    def resolver(self) -> MeaningResolver:
        return self._resolver

    # ── public API ────────────────────────────────────────────────────────────

    def sentence(self, nl_sentence: NLSentence, locale: str, reviewed: bool = False) -> Sentence:
        """Rzuca ValueError, gdy zdanie nie ma offsetów."""
        if not nl_sentence.has_offsets:
            raise ValueError(
                f"Sentence offsets are missing: start={nl_sentence.start_offset} end={nl_sentence.end_offset}"
            )
        base = nl_sentence.start_offset
        terms: list[Term] = []
        tokens = nl_sentence.tokens

        index = 0
        while index < len(tokens):
            token = tokens[index]
            try:
                index += self._step(nl_sentence, index, base, terms, locale, reviewed)
            except Exception as exc:
                logger.warning(
                    "Error while processing token at position %d with text %r, skipping it: %s",
                    index, token.text, exc,
                )
                index += 1

        return Sentence(start=base, end=nl_sentence.end_offset, terms=terms)

    # ── internals ─────────────────────────────────────────────────────────────

    def _step(
        self,
        nl_sentence: NLSentence,
        index: int,
        base: int,
        terms: list[Term],
        locale: str,
        reviewed: bool,
    ) -> int:
        """Przetwarza token o indeksie `index`, ewentualnie dopisuje term. Zwraca przesunięcie."""
        token = nl_sentence.tokens[index]

        if terms:
            if token.start_offset is None:
                raise ValueError(f"Start offset is missing in token {token.text!r}")
            if terms[-1].end > base + token.start_offset:
                return 1

        if token.complex_token_ids:
            winner = pick_winner(nl_sentence.groups_of(index))

            run = 1
            for j in range(index + 1, len(nl_sentence.tokens)):
                if not nl_sentence.is_in_group(j, winner):
                    break
                run += 1

            start = token.start_offset
            end = nl_sentence.tokens[index + run - 1].end_offset
            if start is None or end is None:
                logger.warning(
                    "Missing offsets for complex token starting at position %d, skipping %d tokens",
                    index, run,
                )
            else:
                terms.append(self._group_term(base + start, base + end, winner, locale, reviewed))
            return run

        if token.has_offsets and (token.selected_meaning is not None or token.meanings):
            terms.append(self._token_term(token, base, locale, reviewed))
        elif not token.has_offsets:
            logger.warning("Missing offsets for token at position %d with text %r, skipping it", index, token.text)
        return 1

    def _selection(self, selected: Optional[NLMeaning], locale: str, reviewed: bool):
        """(status, wybrane znaczenie); wybór liczy się tylko, gdy jego id jest niepuste."""
        if selected is not None:
            meaning = self._resolver.semtext_meaning(selected, locale)
            if meaning.id:
                return MeaningStatus.resolve(True, reviewed), meaning
        return MeaningStatus.resolve(False, reviewed), None

    def _meanings(self, meanings, locale: str) -> list[Meaning]:
        return [self._resolver.semtext_meaning(m, locale) for m in _unique(meanings)]

    def _token_term(self, token: NLToken, base: int, locale: str, reviewed: bool) -> Term:
        if base < 0:
            raise ValueError(f"Sentence start offset can't be negative, found {base}")
        status, selected = self._selection(token.selected_meaning, locale, reviewed)

        stems = []
        stem = sanitize_string(token.derived_stem, "Found invalid stem in NLToken")
        if stem:
            stems.append(stem)
        text = sanitize_string(token.text, "Found invalid text in NLToken")
        if text:
            stems.append(text)
        derived = sanitize_strings(token.derived_lemmas, "Found invalid derived lemma in NLToken")

        return Term(
            start=base + token.start_offset,
            end=base + token.end_offset,
            meaning_status=status,
            selected_meaning=selected,
            meanings=self._meanings(token.meanings, locale),
            metadata={NLTEXT_NAMESPACE: NLTermMetadata(stems=stems, derived_lemmas=derived)},
        )

    def _group_term(
        self,
        start: int,
        end: int,
        group: NLComplexToken,
        locale: str,
        reviewed: bool,
    ) -> Term:
        status, selected = self._selection(group.selected_meaning, locale, reviewed)

        meanings = self._meanings(group.meanings, locale)
        if not meanings and selected is None and group.kind != MeaningKind.UNKNOWN:
            # znamy przynajmniej rodzaj znaczenia
            meanings = [
                Meaning(
                    id="",
                    kind=group.kind,
                    probability=1.0,
                    metadata={NLTEXT_NAMESPACE: NLMeaningMetadata(lemma="", summary="")},
                )
            ]
        if group.kind == MeaningKind.UNKNOWN:
            logger.warning("Found complex token of unhandled kind, meaning kind set to UNKNOWN")

        derived = sanitize_strings(group.derived_lemmas, "Found invalid derived lemma in NLComplexToken")
        return Term(
            start=start,
            end=end,
            meaning_status=status,
            selected_meaning=selected,
            meanings=meanings,
            metadata={NLTEXT_NAMESPACE: NLTermMetadata(stems=[], derived_lemmas=derived)},
        )
