import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from reco_ltr.norm.contracts import NormalizerState
from reco_ltr.norm.dynamic_minmax import DynamicMinMaxNormalizer
from reco_ltr.norm.errors import (
    DegenerateRangeError,
    NormalizerStateError,
    ParseError,
    UnresolvedPlaceholderError,
)
from reco_ltr.norm.resolver import ParameterResolver


def test_placeholder_does_not_change_literal_or_delta() -> None:
    n = DynamicMinMaxNormalizer(0.0, 20.0)
    n.set_min('$foo')

    assert n.min == 0.0
    assert n.delta == 20.0
    assert n.min_param == 'foo'
    assert n.pending == ('foo',)


def test_literal_after_placeholder_clears_the_placeholder() -> None:
    n = DynamicMinMaxNormalizer('$foo', 20.0)
    n.set_min('5')

    assert n.min_param is None
    assert n.min == 5.0
    assert n.delta == 15.0


def test_resolution_yields_literal_bounds() -> None:
    template = DynamicMinMaxNormalizer('$foo', 20.0)

    resolved = template.resolve({'foo': 10.0})
    resolved.validate()

    assert resolved.min == 10.0
    assert resolved.delta == 10.0
    assert resolved.normalize(15.0) == 0.5
    assert resolved.pending == ()


def test_resolution_accepts_string_values_and_sigil_keys() -> None:
    template = DynamicMinMaxNormalizer('$lo', '$hi')

    resolved = template.resolve({'$lo': '2', 'hi': '6'})
    resolved.validate()

    assert resolved.normalize(4.0) == 0.5


def test_resolution_does_not_mutate_the_configured_instance() -> None:
    template = DynamicMinMaxNormalizer('$foo', 20.0)

    template.resolve({'foo': 10.0})

    assert template.min == -math.inf
    assert template.pending == ('foo',)
    assert template.state is NormalizerState.CONFIGURED


def test_missing_parameter_fails_resolution() -> None:
    template = DynamicMinMaxNormalizer('$foo', 20.0)

    with pytest.raises(UnresolvedPlaceholderError) as excinfo:
        template.resolve({'bar': 1.0})

    assert excinfo.value.name == 'foo'
    with pytest.raises(NormalizerStateError):
        template.normalize(15.0)


def test_unresolved_normalizer_fails_validation_and_stays_unusable() -> None:
    template = DynamicMinMaxNormalizer('$foo', 20.0)

    with pytest.raises(UnresolvedPlaceholderError, match="'foo'"):
        template.validate()

    assert template.state is NormalizerState.INVALID
    with pytest.raises(NormalizerStateError):
        template.normalize(1.0)


def test_non_numeric_parameter_is_a_parse_error() -> None:
    template = DynamicMinMaxNormalizer('$foo', 20.0)

    with pytest.raises(ParseError):
        template.resolve({'foo': 'ten'})
    with pytest.raises(ParseError, match='literal value'):
        template.resolve({'foo': '$bar'})


def test_resolved_degenerate_range_fails_validation() -> None:
    template = DynamicMinMaxNormalizer('$lo', '$hi')
    resolved = template.resolve({'lo': 4.0, 'hi': 4.0})

    assert resolved.state is NormalizerState.RESOLVED
    with pytest.raises(DegenerateRangeError):
        resolved.validate()
    with pytest.raises(NormalizerStateError):
        resolved.normalize(4.0)


def test_describe_includes_placeholder_names_in_fixed_order() -> None:
    template = DynamicMinMaxNormalizer('$foo', 5.0)

    assert list(template.describe().items()) == [
        ('min', '-inf'),
        ('max', '5.0'),
        ('minParam', 'foo'),
    ]


def test_describe_on_resolved_copy_keeps_placeholder_names() -> None:
    template = DynamicMinMaxNormalizer('$lo', '$hi')

    resolved = template.resolve(ParameterResolver({'lo': 1, 'hi': 3}))

    assert resolved.describe() == {'min': '1.0', 'max': '3.0', 'minParam': 'lo', 'maxParam': 'hi'}
    assert list(resolved.describe()) == ['min', 'max', 'minParam', 'maxParam']


def test_setters_are_rejected_after_resolution_starts() -> None:
    template = DynamicMinMaxNormalizer('$foo', 20.0)
    template.resolve({'foo': 1.0})

    with pytest.raises(NormalizerStateError):
        template.set_max(30.0)


def test_resolving_twice_with_same_params_is_idempotent() -> None:
    template = DynamicMinMaxNormalizer('$lo', '$hi')
    values = [-3.0, 0.0, 2.5, 7.0, 12.0]

    outputs = []
    for _ in range(2):
        resolved = template.resolve({'lo': '0', 'hi': '5'})
        resolved.validate()
        outputs.append([resolved.normalize(v) for v in values])

    assert outputs[0] == outputs[1]


def test_concurrent_requests_resolve_independently() -> None:
    template = DynamicMinMaxNormalizer('$lo', '$hi')
    template.freeze()

    def score(offset: int) -> tuple[int, float]:
        resolved = template.resolve({'lo': offset, 'hi': offset + 10})
        resolved.validate()
        return offset, resolved.normalize(offset + 5)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(score, range(200)))

    assert all(value == 0.5 for _, value in results)
    assert template.pending == ('lo', 'hi')


def test_resolved_infinite_bounds_fail_validation_when_unbounded_allowed() -> None:
    template = DynamicMinMaxNormalizer('$lo', '$hi', reject_unbounded=False)
    resolved = template.resolve({'lo': 'inf', 'hi': 'inf'})

    with pytest.raises(DegenerateRangeError):
        resolved.validate()
    with pytest.raises(NormalizerStateError):
        resolved.normalize(1.0)
