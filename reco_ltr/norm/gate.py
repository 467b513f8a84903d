from __future__ import annotations

import math
import threading
from dataclasses import dataclass

from loguru import logger

from reco_ltr.norm.contracts import Normalizer
from reco_ltr.norm.errors import DegenerateRangeError, NormalizerError, UnboundedRangeError


def check_range(min_value: float, max_value: float, *, reject_unbounded: bool = True) -> float:
    """Return ``max - min`` if it is a usable divisor for min-max scaling."""
    delta = max_value - min_value
    if math.isnan(min_value) or math.isnan(max_value):
        raise DegenerateRangeError(f'MinMax bounds must be numbers | min = {min_value}, max = {max_value}')
    if math.isnan(delta):
        raise DegenerateRangeError(
            f'MinMax Normalizer delta must be a number | min = {min_value}, max = {max_value}, delta = {delta}'
        )
    if delta == 0:
        raise DegenerateRangeError(
            f'MinMax Normalizer delta must not be zero | min = {min_value}, max = {max_value}, delta = {delta}'
        )
    if reject_unbounded and not math.isfinite(delta):
        raise UnboundedRangeError(
            f'MinMax Normalizer range must be finite | min = {min_value}, max = {max_value}, delta = {delta}'
        )
    return delta


@dataclass(slots=True)
class GateStats:
    admitted: int = 0
    rejected: int = 0


class ValidationGate:
    def __init__(self) -> None:
        self.stats = GateStats()
        self._lock = threading.Lock()

    def admit(self, normalizer: Normalizer, *, feature: str | None = None) -> Normalizer:
        try:
            normalizer.validate()
        except NormalizerError as exc:
            with self._lock:
                self.stats.rejected += 1
            logger.bind(
                component='validation_gate',
                feature=feature,
                normalizer=type(normalizer).__name__,
                params=normalizer.describe(),
                error=type(exc).__name__,
            ).warning(f'Normalizer rejected: {exc}')
            raise
        with self._lock:
            self.stats.admitted += 1
        return normalizer
