from __future__ import annotations

import inspect
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, ValidationError, field_validator

from reco_ltr.config.settings import Settings, get_settings
from reco_ltr.norm.contracts import Normalizer
from reco_ltr.norm.dynamic_minmax import DynamicMinMaxNormalizer
from reco_ltr.norm.errors import ConfigurationError
from reco_ltr.norm.identity import IdentityNormalizer
from reco_ltr.norm.minmax import MinMaxNormalizer
from reco_ltr.norm.standard import StandardNormalizer

NORMALIZER_TYPES: dict[str, type[Normalizer]] = {
    cls.type_name: cls
    for cls in (IdentityNormalizer, MinMaxNormalizer, DynamicMinMaxNormalizer, StandardNormalizer)
}

_RESERVED_PARAMS = {'sigil', 'reject_unbounded'}


class NormalizerConfig(BaseModel):
    model_config = ConfigDict(extra='forbid', populate_by_name=True)

    class_name: str = Field(alias='class')
    params: dict[str, StrictStr | StrictFloat | StrictInt] = Field(default_factory=dict)

    @field_validator('class_name')
    @classmethod
    def known_class(cls, value: str) -> str:
        short = value.strip().rsplit('.', 1)[-1]
        if short not in NORMALIZER_TYPES:
            allowed = ', '.join(sorted(NORMALIZER_TYPES))
            raise ValueError(f"Unknown normalizer class '{value}'. Allowed values: {allowed}")
        return short


def _accepted_params(cls: type[Normalizer]) -> set[str]:
    signature = inspect.signature(cls.__init__)
    return {name for name in signature.parameters if name != 'self'} - _RESERVED_PARAMS


def load_normalizer(document: Mapping[str, Any] | NormalizerConfig, settings: Settings | None = None) -> Normalizer:
    """Build a configured (not yet validated) normalizer from a config document."""
    settings = settings or get_settings()
    try:
        config = document if isinstance(document, NormalizerConfig) else NormalizerConfig.model_validate(document)
    except ValidationError as exc:
        raise ConfigurationError(f'Invalid normalizer document: {exc}') from exc

    cls = NORMALIZER_TYPES[config.class_name]
    unknown = set(config.params) - _accepted_params(cls)
    if unknown:
        raise ConfigurationError(f'{config.class_name} does not accept params: {", ".join(sorted(unknown))}')

    kwargs: dict[str, Any] = dict(config.params)
    if issubclass(cls, MinMaxNormalizer):
        kwargs['reject_unbounded'] = settings.reject_unbounded_range
    if issubclass(cls, DynamicMinMaxNormalizer):
        kwargs['sigil'] = settings.placeholder_sigil
    normalizer = cls(**kwargs)
    if isinstance(normalizer, DynamicMinMaxNormalizer):
        normalizer.freeze()
    return normalizer


def dump_normalizer(normalizer: Normalizer) -> dict[str, Any]:
    params = {key: value for key, value in normalizer.describe().items() if not key.endswith('Param')}
    if isinstance(normalizer, DynamicMinMaxNormalizer):
        if normalizer.min_param is not None:
            params['min'] = f'{normalizer.sigil}{normalizer.min_param}'
        if normalizer.max_param is not None:
            params['max'] = f'{normalizer.sigil}{normalizer.max_param}'
    return {'class': normalizer.type_name, 'params': params}
