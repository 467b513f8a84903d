from __future__ import annotations

from dataclasses import dataclass, field

from reco_ltr.norm.errors import ParseError

DEFAULT_SIGIL = '$'


@dataclass(frozen=True, slots=True)
class LiteralBound:
    value: float


@dataclass(frozen=True, slots=True)
class PlaceholderBound:
    name: str


Bound = LiteralBound | PlaceholderBound


def parse_literal(raw: str | float | int) -> float:
    """Parse a literal bound value.

    ``"Infinity"``, ``"-Infinity"`` and ``"NaN"`` are accepted, so documents
    written for the Java normalizers load unchanged.
    """
    if isinstance(raw, bool):
        raise ParseError(raw, 'booleans are not numeric bounds')
    if isinstance(raw, (int, float)):
        return float(raw)
    if not isinstance(raw, str):
        raise ParseError(raw, f'unsupported type {type(raw).__name__}')
    try:
        return float(raw.strip())
    except ValueError as exc:
        raise ParseError(raw) from exc


def parse_bound(raw: str | float | int, sigil: str = DEFAULT_SIGIL) -> Bound:
    if isinstance(raw, str) and raw.strip().startswith(sigil):
        name = raw.strip()[len(sigil):]
        if not name:
            raise ParseError(raw, 'placeholder name is empty')
        return PlaceholderBound(name)
    return LiteralBound(parse_literal(raw))


@dataclass(frozen=True, slots=True)
class MinMaxBounds:
    min: float = float('-inf')
    max: float = float('inf')
    min_param: str | None = None
    max_param: str | None = None
    delta: float = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'delta', self.max - self.min)

    def with_min(self, bound: Bound) -> MinMaxBounds:
        if isinstance(bound, PlaceholderBound):
            return MinMaxBounds(self.min, self.max, bound.name, self.max_param)
        return MinMaxBounds(bound.value, self.max, None, self.max_param)

    def with_max(self, bound: Bound) -> MinMaxBounds:
        if isinstance(bound, PlaceholderBound):
            return MinMaxBounds(self.min, self.max, self.min_param, bound.name)
        return MinMaxBounds(self.min, bound.value, self.min_param, None)

    @property
    def pending(self) -> tuple[str, ...]:
        return tuple(name for name in (self.min_param, self.max_param) if name is not None)
