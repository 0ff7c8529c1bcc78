"""
Port: Disambiguator
Odpowiedzialność: wybór jednego znaczenia spośród kandydatów (albo żadnego).
"""
from typing import Iterable, Optional, Protocol, runtime_checkable

from contracts import Meaning


@runtime_checkable
class Disambiguator(Protocol):
    def disambiguate(self, meanings: Iterable[Meaning]) -> Optional[Meaning]:
        """
        Returns the meaning judged most likely, or None if no meaning
        is clearly better than the others.
        """
        ...
