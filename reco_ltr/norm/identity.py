from __future__ import annotations

from reco_ltr.norm.contracts import Normalizer


class IdentityNormalizer(Normalizer):
    type_name = 'IdentityNormalizer'

    def _check(self) -> None:
        return None

    def _apply(self, value):
        return value

    def describe(self) -> dict[str, str]:
        return {}
