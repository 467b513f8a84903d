from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar

import numpy as np

from reco_ltr.norm.errors import NormalizerError, NormalizerStateError


class NormalizerState(str, Enum):
    CONFIGURED = 'configured'
    RESOLVED = 'resolved'
    VALIDATED = 'validated'
    INVALID = 'invalid'


class Normalizer(ABC):
    """Base contract for feature value normalizers.

    Lifecycle: CONFIGURED (or RESOLVED for request-scoped copies) until
    ``validate()`` moves the instance to VALIDATED or INVALID. Only a
    VALIDATED instance may normalize.
    """

    type_name: ClassVar[str]

    def __init__(self) -> None:
        self._state = NormalizerState.CONFIGURED

    @property
    def state(self) -> NormalizerState:
        return self._state

    @property
    def is_usable(self) -> bool:
        return self._state is NormalizerState.VALIDATED

    def validate(self) -> None:
        try:
            self._check()
        except NormalizerError:
            self._state = NormalizerState.INVALID
            raise
        self._state = NormalizerState.VALIDATED

    def normalize(self, value: float) -> float:
        self._require_usable()
        return float(self._apply(value))

    def normalize_many(self, values) -> np.ndarray:
        self._require_usable()
        return self._apply(np.asarray(values, dtype=float))

    def _require_usable(self) -> None:
        if self._state is not NormalizerState.VALIDATED:
            raise NormalizerStateError(f'{self!r} is {self._state.value}; validate() must succeed before normalize()')

    @abstractmethod
    def _check(self) -> None:
        """Raise a NormalizerError when the configuration cannot be used."""

    @abstractmethod
    def _apply(self, value):
        """Affine transform for a float or a numpy array."""

    @abstractmethod
    def describe(self) -> dict[str, str]:
        """Ordered parameter mapping for diagnostics and re-serialization."""

    def __repr__(self) -> str:
        params = ','.join(f'{key}={value}' for key, value in self.describe().items())
        return f'{type(self).__name__}({params})'
