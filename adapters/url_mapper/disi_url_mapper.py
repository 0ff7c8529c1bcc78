"""
Adapter: DisiUrlMapper
Wariant IdUrlMapper dla klienta backendu indeksującego: pełne URL-e
(schemat + host + ścieżka) zamiast gołych prefiksów.

Konwencje:
  {base}/concepts/{id}
  {base}/instances/{id}
  {base}/instances/new/{id}
  {base}/types/{id}
  {base}/attributedefinitions/{id}?debugConceptId={concept_id}

Id == -1 oznacza "nieznane". Wartości < -1 przy parsowaniu są sprowadzane do -1
(z ostrzeżeniem), przy kodowaniu są odrzucane.
"""
from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import parse_qs, urlsplit

from config import Settings

logger = logging.getLogger("semtext_nltext.disi_url_mapper")

UNKNOWN_ID = -1

CONCEPT_PREFIX = "/concepts"
ENTITY_PREFIX = "/instances"
NEW_ENTITY_PREFIX = ENTITY_PREFIX + "/new"
ATTR_DEF_PREFIX = "/attributedefinitions"
ETYPE_PREFIX = "/types"

DEBUG_GLOBAL_CONCEPT_ID = "debugGlobalConceptId"
DEBUG_CONCEPT_ID = "debugConceptId"


def _check_valid_id(value: Optional[int], message: str) -> None:
    if value is None:
        raise ValueError(f"{message} - Found null id!")
    if value < UNKNOWN_ID:
        raise ValueError(f"{message} - Found id less than {UNKNOWN_ID}: {value}")


def _check_congruent(*ids: int) -> None:
    """Wszystkie id muszą być albo -1, albo właściwymi id, bez mieszania."""
    unknown = [i == UNKNOWN_ID for i in ids]
    if any(unknown) and not all(unknown):
        raise ValueError(f"All ids must be either {UNKNOWN_ID} or proper ids, found {list(ids)}")


def _check_not_empty(url: Optional[str]) -> str:
    if not url:
        raise ValueError(f"Invalid url! Found {url!r}")
    return url


class DisiUrlMapper:
    """
    Mapper id ↔ URL oparty na adresie bazowym, np. 'http://entitypedia.org/api'.
    Spełnia port IdUrlMapper (entity/concept), dodatkowo obsługuje etype,
    definicje atrybutów i nowe encje.
    """

    def __init__(self, base_url: str = "http://localhost") -> None:
        if base_url is None:
            raise ValueError("Base url must not be None")
        self._base = base_url.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> DisiUrlMapper:
        cfg = settings or Settings()
        return cls(base_url=cfg.disi_base_url)

    @property
    def base_url(self) -> str:
        return self._base

    # ── parsing ───────────────────────────────────────────────────────────────

    @staticmethod
    def _parse_id(raw: str) -> int:
        value = int(raw)
        if value < UNKNOWN_ID:
            logger.warning(
                "Found id %s which is less than %s, converting it to %s",
                value, UNKNOWN_ID, UNKNOWN_ID,
            )
            return UNKNOWN_ID
        return value

    def _parse_id_from_prefix(self, prefix: str, url: str) -> int:
        """Wyciąga np. '123' z http://my-website.com/concepts/123?some-param=bla"""
        parts = urlsplit(_check_not_empty(url))
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"Found invalid url: {url}")

        without_query = f"{parts.scheme}://{parts.netloc}{parts.path}"
        to_strip = f"{self._base}{prefix}/"
        if not without_query.startswith(to_strip):
            raise ValueError(f"Invalid URL for prefix {prefix}: {url}")
        try:
            return self._parse_id(without_query[len(to_strip):])
        except ValueError as exc:
            raise ValueError(f"Invalid URL for prefix {prefix}: {url}") from exc

    def _parse_id_from_param(self, param: str, url: str) -> int:
        params = parse_qs(urlsplit(_check_not_empty(url)).query, keep_blank_values=True)
        values = params.get(param, [])
        if len(values) != 1:
            raise ValueError(f"Expected one {param}, found {len(values)} instead.")
        try:
            return self._parse_id(values[0])
        except ValueError as exc:
            raise ValueError(f"Invalid {param} in url: {url}") from exc

    # ── IdUrlMapper protocol ──────────────────────────────────────────────────

    def entity_id_to_url(self, entity_id: int) -> str:
        _check_valid_id(entity_id, "Invalid entity id!")
        return f"{self._base}{ENTITY_PREFIX}/{entity_id}"

    def concept_id_to_url(self, concept_id: int) -> str:
        _check_valid_id(concept_id, "Invalid concept id!")
        return f"{self._base}{CONCEPT_PREFIX}/{concept_id}"

    def url_to_entity_id(self, url: str) -> int:
        return self._parse_id_from_prefix(ENTITY_PREFIX, url)

    def url_to_concept_id(self, url: str) -> int:
        return self._parse_id_from_prefix(CONCEPT_PREFIX, url)

    # ── concepts ──────────────────────────────────────────────────────────────

    def concept_url_to_global_id(self, url: str) -> int:
        """Globalne id konceptu, przenoszone w parametrze debugGlobalConceptId."""
        return self._parse_id_from_param(DEBUG_GLOBAL_CONCEPT_ID, url)

    # ── new entities ──────────────────────────────────────────────────────────

    def entity_new_id_to_url(self, entity_id: int) -> str:
        _check_valid_id(entity_id, "Invalid entity id!")
        return f"{self._base}{NEW_ENTITY_PREFIX}/{entity_id}"

    def entity_new_url_to_id(self, url: str) -> int:
        return self._parse_id_from_prefix(NEW_ENTITY_PREFIX, url)

    # ── etypes ────────────────────────────────────────────────────────────────

    def etype_id_to_url(self, etype_id: int) -> str:
        _check_valid_id(etype_id, "Invalid etype id!")
        _check_congruent(etype_id)
        return f"{self._base}{ETYPE_PREFIX}/{etype_id}"

    def etype_url_to_id(self, url: str) -> int:
        return self._parse_id_from_prefix(ETYPE_PREFIX, url)

    # ── attribute definitions ─────────────────────────────────────────────────

    def attr_def_id_to_url(self, attr_def_id: int, concept_id: int) -> str:
        """Id konceptu jest wymuszone w URL, żeby definicję atrybutu dało się utożsamić z konceptem."""
        _check_valid_id(attr_def_id, "Invalid attribute definition id!")
        _check_valid_id(concept_id, "Invalid concept id!")
        _check_congruent(attr_def_id, concept_id)
        return f"{self._base}{ATTR_DEF_PREFIX}/{attr_def_id}?{DEBUG_CONCEPT_ID}={concept_id}"

    def attr_def_url_to_id(self, url: str) -> int:
        return self._parse_id_from_prefix(ATTR_DEF_PREFIX, url)

    def attr_def_url_to_concept_id(self, url: str) -> int:
        return self._parse_id_from_param(DEBUG_CONCEPT_ID, url)

    # ── predicates ────────────────────────────────────────────────────────────

    def is_entity_url(self, url: str) -> bool:
        return ENTITY_PREFIX in _check_not_empty(url)

    def is_concept_url(self, url: str) -> bool:
        return CONCEPT_PREFIX in _check_not_empty(url)

    def is_etype_url(self, url: str) -> bool:
        return ETYPE_PREFIX in _check_not_empty(url)

    def is_attr_def_url(self, url: str) -> bool:
        return ATTR_DEF_PREFIX in _check_not_empty(url)

    def __repr__(self) -> str:
        return f"DisiUrlMapper(base_url={self._base!r})"
