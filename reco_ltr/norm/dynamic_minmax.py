from __future__ import annotations

from typing import Mapping

from loguru import logger

from reco_ltr.norm.bounds import DEFAULT_SIGIL, LiteralBound, MinMaxBounds, parse_bound
from reco_ltr.norm.contracts import NormalizerState
from reco_ltr.norm.errors import NormalizerStateError, UnresolvedPlaceholderError
from reco_ltr.norm.minmax import MinMaxNormalizer
from reco_ltr.norm.resolver import ParameterResolver


class DynamicMinMaxNormalizer(MinMaxNormalizer):
    """Min-max scaling whose bounds may be request parameters.

    A bound configured as ``"$name"`` is a placeholder: the literal bound is
    left untouched until ``resolve()`` looks ``name`` up in the request
    parameters. Example configuration::

        {"class": "DynamicMinMaxNormalizer", "params": {"min": "$min", "max": "$max"}}

    The configured instance is never changed by a request. ``resolve()``
    returns a new request-scoped instance with literal bounds that still
    reports the placeholder names in ``describe()``.
    """

    type_name = 'DynamicMinMaxNormalizer'

    def __init__(
        self,
        min: str | float = float('-inf'),
        max: str | float = float('inf'),
        *,
        sigil: str = DEFAULT_SIGIL,
        reject_unbounded: bool = True,
    ) -> None:
        super().__init__(reject_unbounded=reject_unbounded)
        self.sigil = sigil
        self._frozen = False
        self._template: MinMaxBounds | None = None
        self.set_min(min)
        self.set_max(max)

    def set_min(self, raw: str | float) -> None:
        self._require_configuring()
        self._bounds = self._bounds.with_min(parse_bound(raw, self.sigil))

    def set_max(self, raw: str | float) -> None:
        self._require_configuring()
        self._bounds = self._bounds.with_max(parse_bound(raw, self.sigil))

    def freeze(self) -> None:
        self._frozen = True

    def _require_configuring(self) -> None:
        if self._frozen or self._state is not NormalizerState.CONFIGURED:
            raise NormalizerStateError(f'{type(self).__name__} bounds can only be set during configuration')

    @property
    def min_param(self) -> str | None:
        if self._template is not None:
            return self._template.min_param
        return self._bounds.min_param

    @property
    def max_param(self) -> str | None:
        if self._template is not None:
            return self._template.max_param
        return self._bounds.max_param

    @property
    def pending(self) -> tuple[str, ...]:
        return self._bounds.pending

    @property
    def is_dynamic(self) -> bool:
        return bool(self._bounds.pending)

    def resolve(self, params: Mapping[str, str | float] | ParameterResolver | None) -> DynamicMinMaxNormalizer:
        if not isinstance(params, ParameterResolver):
            params = ParameterResolver(params, sigil=self.sigil)
        self._frozen = True
        bounds = self._bounds
        if bounds.min_param is not None:
            bounds = bounds.with_min(LiteralBound(params.lookup(bounds.min_param)))
        if bounds.max_param is not None:
            bounds = bounds.with_max(LiteralBound(params.lookup(bounds.max_param)))

        resolved = type(self)(bounds.min, bounds.max, sigil=self.sigil, reject_unbounded=self.reject_unbounded)
        resolved._template = self._template or self._bounds
        resolved._state = NormalizerState.RESOLVED
        resolved._frozen = True
        logger.bind(component='dynamic_minmax', params=resolved.describe()).debug('Placeholder bounds resolved')
        return resolved

    def _check(self) -> None:
        if self._bounds.pending:
            raise UnresolvedPlaceholderError(self._bounds.pending[0])
        super()._check()

    def describe(self) -> dict[str, str]:
        params = super().describe()
        if self.min_param is not None:
            params['minParam'] = self.min_param
        if self.max_param is not None:
            params['maxParam'] = self.max_param
        return params
