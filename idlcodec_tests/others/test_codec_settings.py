from pathlib import Path

import pytest
from pydantic import ValidationError

from idlcodec.conf import DEFAULT_SETTINGS_FILEPATH, CodecSettings, get_settings, load_yaml_settings
from idlcodec.utils.dict import merge_dicts
from idlcodec.utils.yaml import read_extended_yaml_dict, read_yaml_dict

FIXTURES = Path(__file__).parent / 'fixtures'


def test_default_settings() -> None:
    settings = load_yaml_settings(DEFAULT_SETTINGS_FILEPATH)
    assert settings == CodecSettings()
    assert settings.ACCOUNT_ENCODE_MAX_SIZE == 1000
    assert settings.ACCOUNT_DECODE_MAX_SIZE == 10 * 1024 * 1024


def test_valid_settings_from_yaml() -> None:
    settings = load_yaml_settings(str(FIXTURES / 'valid_settings_fixture.yml'))
    assert settings == CodecSettings(ACCOUNT_ENCODE_MAX_SIZE=10240, ACCOUNT_DECODE_MAX_SIZE=None)


def test_extended_settings_from_yaml() -> None:
    # default.yml is not next to the fixture, it is found among the packaged settings
    settings = load_yaml_settings(str(FIXTURES / 'extended_settings_fixture.yml'))
    assert settings == CodecSettings(ACCOUNT_ENCODE_MAX_SIZE=2048, ACCOUNT_DECODE_MAX_SIZE=10 * 1024 * 1024)


@pytest.mark.parametrize(
    ['filepath', 'error'],
    [
        ('invalid_settings_fixture.yml', 'Value error, max size must be positive'),
        ('unknown_key_settings_fixture.yml', 'Extra inputs are not permitted'),
    ],
)
def test_invalid_settings_from_yaml(filepath: str, error: str) -> None:
    with pytest.raises(ValidationError) as e:
        load_yaml_settings(str(FIXTURES / filepath))
    assert error in str(e.value)


def test_self_extending_yaml() -> None:
    with pytest.raises(ValueError, match='extends itself'):
        read_extended_yaml_dict(FIXTURES / 'self_extending_settings_fixture.yml')


def test_read_yaml_dict(tmp_path: Path) -> None:
    empty = tmp_path / 'empty.yml'
    empty.write_text('')
    assert read_yaml_dict(empty) == {}

    not_a_dict = tmp_path / 'list.yml'
    not_a_dict.write_text('- 1\n- 2\n')
    with pytest.raises(ValueError, match='cannot be parsed as a dictionary'):
        read_yaml_dict(not_a_dict)

    with pytest.raises(ValueError, match='is not a file'):
        read_yaml_dict(tmp_path / 'missing.yml')


def test_extends_relative_to_file(tmp_path: Path) -> None:
    (tmp_path / 'base.yml').write_text('a: 1\nnested:\n  b: 2\n  c: 3\n')
    (tmp_path / 'child.yml').write_text('extends: base.yml\nnested:\n  c: 4\n')
    assert read_extended_yaml_dict(tmp_path / 'child.yml') == {'a': 1, 'nested': {'b': 2, 'c': 4}}


def test_merge_dicts_keeps_inputs() -> None:
    base = {'a': {'b': [1]}}
    merged = merge_dicts(base, {'a': {'c': 2}})
    assert merged == {'a': {'b': [1], 'c': 2}}
    merged['a']['b'].append(2)
    assert base == {'a': {'b': [1]}}


def test_global_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
    monkeypatch.setenv('IDLCODEC_CONFIG_YAML', str(FIXTURES / 'valid_settings_fixture.yml'))
    settings = get_settings.get_global_settings()
    assert settings.ACCOUNT_ENCODE_MAX_SIZE == 10240
    assert get_settings.get_global_settings() is settings

    monkeypatch.setenv('IDLCODEC_CONFIG_YAML', DEFAULT_SETTINGS_FILEPATH)
    with pytest.raises(Exception, match='loading config twice with a different file'):
        get_settings.get_global_settings()


def test_global_settings_default_file(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
    monkeypatch.delenv('IDLCODEC_CONFIG_YAML', raising=False)
    assert get_settings.get_global_settings() == CodecSettings()
