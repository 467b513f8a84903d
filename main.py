from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from loguru import logger

from reco_ltr.config.logging_config import configure_logging
from reco_ltr.norm.errors import ConfigurationError, NormalizerError
from reco_ltr.ranking.feature_normalizer import FeatureNormalizerSet


def _parse_param(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition('=')
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"Expected name=value, got '{raw}'")
    return name.strip(), value.strip()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Reco LTR - feature value normalization')
    parser.add_argument('--config', type=Path, required=True, help='JSON object: feature name -> normalizer document')
    parser.add_argument('--features', type=Path, required=True, help='JSON object: feature name -> raw value')
    parser.add_argument('--param', type=_parse_param, action='append', default=[], help='request parameter name=value')
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging()
    try:
        documents = json.loads(args.config.read_text(encoding='utf-8'))
        features = json.loads(args.features.read_text(encoding='utf-8'))
        if not isinstance(features, dict):
            raise ConfigurationError('Features file must contain a JSON object of feature name -> value')
        normalizers = FeatureNormalizerSet.from_config(documents)
        result = normalizers.for_request(dict(args.param)).normalize(features)
    except (NormalizerError, OSError, json.JSONDecodeError) as exc:
        logger.bind(component='cli').error(str(exc))
        sys.stderr.write(f'error: {exc}\n')
        return 2
    sys.stdout.write(json.dumps(result.values, sort_keys=True) + '\n')
    return 0


if __name__ == '__main__':
    raise SystemExit(run())
