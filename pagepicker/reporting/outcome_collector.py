"""Collects per-file and per-page outcomes of an extraction batch."""

import logging
from typing import Dict, List

from ..models import ProcessOutcome

logger = logging.getLogger(__name__)


class OutcomeCollector:
    """Accumulates one ProcessOutcome per unit of work, in submission order."""

    def __init__(self):
        self._outcomes: List[ProcessOutcome] = []

    def succeeded(self, file: str, message: str) -> ProcessOutcome:
        outcome = ProcessOutcome(file=file, success=True, message=message)
        self._outcomes.append(outcome)
        logger.info(f"{file}: {message}")
        return outcome

    def failed(self, file: str, message: str) -> ProcessOutcome:
        outcome = ProcessOutcome(file=file, success=False, message=message)
        self._outcomes.append(outcome)
        logger.warning(f"{file or '<batch>'}: {message}")
        return outcome

    @property
    def outcomes(self) -> List[ProcessOutcome]:
        return list(self._outcomes)

    def summary(self) -> Dict[str, int]:
        ok = sum(1 for o in self._outcomes if o.success)
        return {
            "total": len(self._outcomes),
            "succeeded": ok,
            "failed": len(self._outcomes) - ok,
        }
