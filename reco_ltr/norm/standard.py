from __future__ import annotations

import math

from reco_ltr.norm.bounds import parse_literal
from reco_ltr.norm.contracts import Normalizer
from reco_ltr.norm.errors import DegenerateRangeError


class StandardNormalizer(Normalizer):
    """Z-score scaling: ``(value - avg) / std``."""

    type_name = 'StandardNormalizer'

    def __init__(self, avg: str | float = 0.0, std: str | float = 1.0) -> None:
        super().__init__()
        self.avg = parse_literal(avg)
        self.std = parse_literal(std)

    def _check(self) -> None:
        if math.isnan(self.avg) or not self.std > 0:
            raise DegenerateRangeError(f'Standard Normalizer std must be positive | avg = {self.avg}, std = {self.std}')

    def _apply(self, value):
        return (value - self.avg) / self.std

    def describe(self) -> dict[str, str]:
        return {'avg': str(self.avg), 'std': str(self.std)}
