from __future__ import annotations

from typing import Mapping

from reco_ltr.norm.bounds import DEFAULT_SIGIL, PlaceholderBound, parse_bound
from reco_ltr.norm.errors import ParseError, UnresolvedPlaceholderError


class ParameterResolver:
    """Request-scoped lookup of placeholder values.

    Keys may be supplied with or without the sigil (``"$min"`` and ``"min"``
    are the same parameter). Values are floats or numeric strings.
    """

    def __init__(self, params: Mapping[str, str | float] | None = None, *, sigil: str = DEFAULT_SIGIL) -> None:
        self.sigil = sigil
        self._params = {self._key(name): value for name, value in (params or {}).items()}

    def _key(self, name: str) -> str:
        return name[len(self.sigil):] if name.startswith(self.sigil) else name

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._params

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self._params))

    def lookup(self, name: str) -> float:
        key = self._key(name)
        if key not in self._params:
            raise UnresolvedPlaceholderError(key)
        raw = self._params[key]
        bound = parse_bound(raw, self.sigil)
        if isinstance(bound, PlaceholderBound):
            raise ParseError(raw, f'request parameter {key!r} must be a literal value')
        return bound.value
