from reco_ltr.norm.bounds import Bound, LiteralBound, MinMaxBounds, PlaceholderBound, parse_bound, parse_literal
from reco_ltr.norm.contracts import Normalizer, NormalizerState
from reco_ltr.norm.dynamic_minmax import DynamicMinMaxNormalizer
from reco_ltr.norm.errors import (
    ConfigurationError,
    DegenerateRangeError,
    NormalizerError,
    NormalizerStateError,
    ParseError,
    UnboundedRangeError,
    UnresolvedPlaceholderError,
)
from reco_ltr.norm.gate import ValidationGate, check_range
from reco_ltr.norm.identity import IdentityNormalizer
from reco_ltr.norm.minmax import MinMaxNormalizer
from reco_ltr.norm.registry import NORMALIZER_TYPES, NormalizerConfig, dump_normalizer, load_normalizer
from reco_ltr.norm.resolver import ParameterResolver
from reco_ltr.norm.standard import StandardNormalizer

__all__ = [
    'Bound',
    'LiteralBound',
    'PlaceholderBound',
    'MinMaxBounds',
    'parse_bound',
    'parse_literal',
    'Normalizer',
    'NormalizerState',
    'IdentityNormalizer',
    'MinMaxNormalizer',
    'DynamicMinMaxNormalizer',
    'StandardNormalizer',
    'ParameterResolver',
    'ValidationGate',
    'check_range',
    'NORMALIZER_TYPES',
    'NormalizerConfig',
    'load_normalizer',
    'dump_normalizer',
    'NormalizerError',
    'ParseError',
    'DegenerateRangeError',
    'UnboundedRangeError',
    'UnresolvedPlaceholderError',
    'NormalizerStateError',
    'ConfigurationError',
]
