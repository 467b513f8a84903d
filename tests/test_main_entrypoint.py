import json

import pytest

import main


@pytest.fixture
def config_files(tmp_path):
    config = tmp_path / 'norms.json'
    features = tmp_path / 'features.json'
    config.write_text(
        json.dumps(
            {
                'score': {'class': 'DynamicMinMaxNormalizer', 'params': {'min': '$lo', 'max': '20'}},
                'clicks': {'class': 'MinMaxNormalizer', 'params': {'min': '0', 'max': '100'}},
            }
        ),
        encoding='utf-8',
    )
    features.write_text(json.dumps({'score': 15.0, 'clicks': 25.0}), encoding='utf-8')
    return config, features


def test_run_prints_normalized_features(config_files, capsys) -> None:
    config, features = config_files

    code = main.run(['--config', str(config), '--features', str(features), '--param', 'lo=10'])

    assert code == 0
    out = capsys.readouterr().out.strip().splitlines()[-1]
    assert json.loads(out) == {'clicks': 0.25, 'score': 0.5}


def test_run_reports_missing_param(config_files, capsys) -> None:
    config, features = config_files

    code = main.run(['--config', str(config), '--features', str(features)])

    assert code == 2
    assert "placeholder 'lo'" in capsys.readouterr().err


def test_param_must_be_name_value() -> None:
    with pytest.raises(SystemExit):
        main._parse_args(['--config', 'a', '--features', 'b', '--param', 'novalue'])


@pytest.mark.parametrize(
    'features_json,message',
    [
        ('{"score": null, "clicks": 1}', 'must be a number'),
        ('{"score": "high", "clicks": 1}', 'must be a number'),
        ('[15.0, 25.0]', 'Features file must contain a JSON object'),
        ('{not json', 'error:'),
    ],
)
def test_run_rejects_bad_feature_files(config_files, capsys, features_json, message) -> None:
    config, features = config_files
    features.write_text(features_json, encoding='utf-8')

    code = main.run(['--config', str(config), '--features', str(features), '--param', 'lo=10'])

    assert code == 2
    assert message in capsys.readouterr().err


@pytest.mark.parametrize(
    'config_json,message',
    [
        ('["MinMaxNormalizer"]', 'must map feature names'),
        ('{"score": 5}', 'Invalid normalizer document'),
    ],
)
def test_run_rejects_bad_config_files(config_files, capsys, config_json, message) -> None:
    config, features = config_files
    config.write_text(config_json, encoding='utf-8')

    code = main.run(['--config', str(config), '--features', str(features)])

    assert code == 2
    assert message in capsys.readouterr().err


def test_run_reports_missing_file(tmp_path, capsys) -> None:
    code = main.run(['--config', str(tmp_path / 'absent.json'), '--features', str(tmp_path / 'f.json')])

    assert code == 2
    assert 'absent.json' in capsys.readouterr().err
