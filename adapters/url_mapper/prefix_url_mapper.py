"""
Adapter: UrlMapper
Implementuje port IdUrlMapper przez proste doklejanie/odcinanie prefiksu.

  encode: prefix + id          (np. "concepts/" + 3 → "concepts/3")
  decode: URL musi zaczynać się DOKŁADNIE od prefiksu, reszta to liczba dziesiętna

Domyślny mapper (puste prefiksy) zapisuje id jako "12345".
"""
from __future__ import annotations

import re
from typing import Optional

from config import Settings

_NUMERIC_ID = re.compile(r"[+-]?[0-9]+")


def parse_numerical_id(prefix: str, url: Optional[str]) -> int:
    """Odcina `prefix` z `url` i parsuje resztę jako liczbę całkowitą.

    Rzuca ValueError gdy prefiks się nie zgadza albo reszta nie jest liczbą.
    """
    if url is None:
        raise ValueError(f"Cannot parse id from null url (expected prefix {prefix!r})")
    if not url.startswith(prefix):
        raise ValueError(f"Url {url!r} does not start with prefix {prefix!r}")
    rest = url[len(prefix):]
    if not _NUMERIC_ID.fullmatch(rest):
        raise ValueError(f"Url {url!r} has non-numeric id {rest!r} after prefix {prefix!r}")
    return int(rest)


class UrlMapper:
    """
    Prefiksowy konwerter numerycznych id ↔ URL, osobno dla encji i konceptów.
    Niemutowalny: prefiksy ustalane raz w konstruktorze.
    """

    def __init__(self, entity_prefix: str = "", concept_prefix: str = "") -> None:
        if entity_prefix is None or concept_prefix is None:
            raise ValueError("UrlMapper prefixes must not be None")
        self._entity_prefix = entity_prefix
        self._concept_prefix = concept_prefix

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> UrlMapper:
        cfg = settings or Settings()
        return cls(entity_prefix=cfg.entity_prefix, concept_prefix=cfg.concept_prefix)

    @property
    def entity_prefix(self) -> str:
        return self._entity_prefix

    @property
    def concept_prefix(self) -> str:
        return self._concept_prefix

    # ── IdUrlMapper protocol ──────────────────────────────────────────────────

    def entity_id_to_url(self, entity_id: int) -> str:
        if entity_id is None:
            raise ValueError("Entity id must not be None")
        return f"{self._entity_prefix}{entity_id}"

    def concept_id_to_url(self, concept_id: int) -> str:
        if concept_id is None:
            raise ValueError("Concept id must not be None")
        return f"{self._concept_prefix}{concept_id}"

    def url_to_entity_id(self, url: str) -> int:
        return parse_numerical_id(self._entity_prefix, url)

    def url_to_concept_id(self, url: str) -> int:
        return parse_numerical_id(self._concept_prefix, url)

    def __repr__(self) -> str:
        return (
            f"UrlMapper(entity_prefix={self._entity_prefix!r}, "
            f"concept_prefix={self._concept_prefix!r})"
        )
