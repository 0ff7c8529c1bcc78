"""
Port: IdUrlMapper
Odpowiedzialność: dwukierunkowe mapowanie numerycznych id konceptów/encji na URL-e.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class IdUrlMapper(Protocol):
    def entity_id_to_url(self, entity_id: int) -> str:
        """Returns the entity id as an url. Raises ValueError on invalid id."""
        ...

    def concept_id_to_url(self, concept_id: int) -> str:
        """Returns the concept id as an url. Raises ValueError on invalid id."""
        ...

    def url_to_entity_id(self, url: str) -> int:
        """Parses an entity url back to its numeric id. Raises ValueError on unparseable url."""
        ...

    def url_to_concept_id(self, url: str) -> int:
        """Parses a concept url back to its numeric id. Raises ValueError on unparseable url."""
        ...
