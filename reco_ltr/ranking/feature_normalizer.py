from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import Any, Mapping

import numpy as np
import pandas as pd
from loguru import logger

from reco_ltr.config.settings import Settings, get_settings
from reco_ltr.norm.contracts import Normalizer
from reco_ltr.norm.dynamic_minmax import DynamicMinMaxNormalizer
from reco_ltr.norm.errors import ConfigurationError, NormalizerError, ParseError
from reco_ltr.norm.gate import ValidationGate
from reco_ltr.norm.identity import IdentityNormalizer
from reco_ltr.norm.registry import load_normalizer


@dataclass
class NormalizationResult:
    values: dict[str, float]
    passthrough: tuple[str, ...] = field(default_factory=tuple)


class RequestNormalizers:
    """Validated normalizers for a single scoring request."""

    def __init__(self, normalizers: dict[str, Normalizer], fallbacks: tuple[str, ...] = ()) -> None:
        self._normalizers = normalizers
        self.fallbacks = fallbacks

    def __getitem__(self, feature: str) -> Normalizer:
        return self._normalizers[feature]

    def __contains__(self, feature: object) -> bool:
        return feature in self._normalizers

    @property
    def features(self) -> tuple[str, ...]:
        return tuple(self._normalizers)

    def normalize(self, features: Mapping[str, float]) -> NormalizationResult:
        out: dict[str, float] = {}
        for key, value in features.items():
            normalizer = self._normalizers.get(key)
            if normalizer is None:
                out[key] = value
                continue
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ParseError(value, f'feature {key!r} must be a number')
            out[key] = normalizer.normalize(value)
        passthrough = tuple(key for key in features if key in self.fallbacks)
        return NormalizationResult(values=out, passthrough=passthrough)

    def normalize_many(self, feature: str, values) -> np.ndarray:
        return self._normalizers[feature].normalize_many(values)

    def normalize_frame(self, frame: pd.DataFrame) -> pd.DataFrame:
        out = frame.copy()
        for column in out.columns:
            normalizer = self._normalizers.get(column)
            if normalizer is not None:
                out[column] = normalizer.normalize_many(out[column].to_numpy(dtype=float))
        return out


class FeatureNormalizerSet:
    """Configured normalizers keyed by feature name.

    Placeholder-free normalizers are validated once here and shared by every
    request. Normalizers with placeholder bounds are resolved into a fresh
    copy per request, so the configured instances are never mutated.
    """

    def __init__(
        self,
        normalizers: Mapping[str, Normalizer],
        *,
        gate: ValidationGate | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.gate = gate or ValidationGate()
        self._shared: dict[str, Normalizer] = {}
        self._dynamic: dict[str, DynamicMinMaxNormalizer] = {}
        for feature, normalizer in normalizers.items():
            if isinstance(normalizer, DynamicMinMaxNormalizer) and normalizer.is_dynamic:
                normalizer.freeze()
                self._dynamic[feature] = normalizer
            else:
                self._shared[feature] = self.gate.admit(normalizer, feature=feature)

    @classmethod
    def from_config(
        cls,
        documents: Mapping[str, Mapping[str, Any]],
        *,
        gate: ValidationGate | None = None,
        settings: Settings | None = None,
    ) -> FeatureNormalizerSet:
        settings = settings or get_settings()
        if not isinstance(documents, Mapping):
            raise ConfigurationError('Normalizer configuration must map feature names to normalizer documents')
        normalizers = {feature: load_normalizer(document, settings) for feature, document in documents.items()}
        return cls(normalizers, gate=gate, settings=settings)

    @property
    def dynamic_features(self) -> tuple[str, ...]:
        return tuple(self._dynamic)

    @property
    def required_params(self) -> tuple[str, ...]:
        names = {name for normalizer in self._dynamic.values() for name in normalizer.pending}
        return tuple(sorted(names))

    def for_request(self, params: Mapping[str, str | float] | None = None) -> RequestNormalizers:
        scoped: dict[str, Normalizer] = dict(self._shared)
        fallbacks: list[str] = []
        for feature, template in self._dynamic.items():
            try:
                scoped[feature] = self.gate.admit(template.resolve(params), feature=feature)
            except NormalizerError as exc:
                if self.settings.request_failure_policy == 'raise':
                    raise
                logger.bind(component='feature_normalizer', feature=feature, error=type(exc).__name__).warning(
                    f'Normalizer unavailable for request, passing feature through: {exc}'
                )
                fallback = IdentityNormalizer()
                fallback.validate()
                scoped[feature] = fallback
                fallbacks.append(feature)
        return RequestNormalizers(scoped, tuple(fallbacks))
