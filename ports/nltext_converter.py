"""
Port: NLTextToSemText
Odpowiedzialność: konwersja tekstu anotowanego przez pipeline NLP (NLText) do SemText.
"""
from typing import Optional, Protocol, runtime_checkable

from adapters.nltext.models import NLMeaning, NLText
from contracts import Meaning, SemText


@runtime_checkable
class NLTextToSemText(Protocol):
    def semtext(self, nltext: Optional[NLText], reviewed: bool = False) -> SemText:
        """
        Converts an annotated text into non-overlapping terms.
        reviewed=True means the whole text was checked by a human
        (statuses REVIEWED / NOT_SURE), otherwise SELECTED / TO_DISAMBIGUATE.
        Never raises: broken sentences and tokens are skipped.
        """
        ...

    def semtext_meaning(self, meaning: Optional[NLMeaning], locale: str) -> Meaning:
        """Converts a single meaning. Never raises, returns Meaning() on error."""
        ...
