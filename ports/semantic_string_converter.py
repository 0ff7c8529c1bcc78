"""
Port: SemanticStringBridge
Odpowiedzialność: konwersja SemText ↔ SemanticString (format backendu indeksującego).
"""
from typing import Optional, Protocol, runtime_checkable

from adapters.semantic_string.models import SemanticString
from contracts import SemText


@runtime_checkable
class SemanticStringBridge(Protocol):
    def semtext(self, semantic_string: Optional[SemanticString], reviewed: bool = False) -> SemText:
        """
        Converts a semantic string into a SemText with a single sentence.
        Overlapping terms and terms without meanings are dropped.
        """
        ...

    def semantic_string(self, semtext: SemText) -> SemanticString:
        """
        Converts a SemText into a semantic string, one complex concept per term.
        Lossy: the selected meaning is only recoverable from its boosted weight.
        Converting the result back with semtext() keeps spans and selected ids
        of terms that had a selection, but:
          - a term without a selection may come back selected, when the
            disambiguator finds a single or clearly leading candidate;
          - a term whose meanings all have empty ids comes back without
            meanings and is therefore dropped.
        Raises ValueError on meanings that cannot be mapped back to numeric ids.
        """
        ...
