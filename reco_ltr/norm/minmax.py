from __future__ import annotations

from reco_ltr.norm.bounds import MinMaxBounds, parse_literal
from reco_ltr.norm.contracts import Normalizer
from reco_ltr.norm.gate import check_range


class MinMaxNormalizer(Normalizer):
    """Scale a feature value with a fixed ``(min, max)`` range.

    ``normalize(v) = (v - min) / (max - min)``. Values outside the range are
    extrapolated linearly, not clamped.
    """

    type_name = 'MinMaxNormalizer'

    def __init__(
        self,
        min: str | float = float('-inf'),
        max: str | float = float('inf'),
        *,
        reject_unbounded: bool = True,
    ) -> None:
        super().__init__()
        self.reject_unbounded = reject_unbounded
        self._bounds = MinMaxBounds(parse_literal(min), parse_literal(max))

    @property
    def bounds(self) -> MinMaxBounds:
        return self._bounds

    @property
    def min(self) -> float:
        return self._bounds.min

    @property
    def max(self) -> float:
        return self._bounds.max

    @property
    def delta(self) -> float:
        return self._bounds.delta

    def _check(self) -> None:
        check_range(self._bounds.min, self._bounds.max, reject_unbounded=self.reject_unbounded)

    def _apply(self, value):
        bounds = self._bounds
        return (value - bounds.min) / bounds.delta

    def describe(self) -> dict[str, str]:
        return {'min': str(self._bounds.min), 'max': str(self._bounds.max)}
