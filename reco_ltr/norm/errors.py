from __future__ import annotations


class NormalizerError(RuntimeError):
    """Base error for normalizer configuration and request failures."""


class ParseError(NormalizerError, ValueError):
    def __init__(self, raw: object, reason: str = 'not a valid float') -> None:
        super().__init__(f'Cannot parse bound {raw!r}: {reason}')
        self.raw = raw


class DegenerateRangeError(NormalizerError):
    pass


class UnboundedRangeError(NormalizerError):
    pass


class UnresolvedPlaceholderError(NormalizerError):
    def __init__(self, name: str) -> None:
        super().__init__(f'No request parameter supplied for placeholder {name!r}')
        self.name = name


class NormalizerStateError(NormalizerError):
    pass


class ConfigurationError(NormalizerError):
    pass
