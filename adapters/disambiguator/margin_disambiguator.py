"""
Adapter: MarginDisambiguator
Wybiera najbardziej prawdopodobne znaczenie tylko wtedy, gdy wyraźnie
wyprzedza drugie w kolejności (o co najmniej `margin`).
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from config import Settings
from contracts import Meaning

logger = logging.getLogger("semtext_nltext.disambiguator")

DEFAULT_MARGIN = 1.0 / 6.0


class MarginDisambiguator:
    def __init__(self, margin: float = DEFAULT_MARGIN) -> None:
        if margin < 0:
            raise ValueError(f"Disambiguation margin must be >= 0, got {margin}")
        self._margin = margin

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> MarginDisambiguator:
        cfg = settings or Settings()
        return cls(margin=cfg.disambiguation_margin)

    @property
    def margin(self) -> float:
        return self._margin

    def disambiguate(self, meanings: Iterable[Meaning]) -> Optional[Meaning]:
        candidates = sorted(meanings, key=lambda m: m.probability, reverse=True)
        if not candidates:
            return None
        if len(candidates) == 1:
            return candidates[0]

        best, runner_up = candidates[0], candidates[1]
        if best.probability - runner_up.probability >= self._margin:
            return best

        logger.debug(
            "No clear winner among %d meanings (%.3f vs %.3f)",
            len(candidates), best.probability, runner_up.probability,
        )
        return None
