import pytest

import unit_utils
from luaubc.disasm.settings import DisasmSettings, load_settings


def test_defaults():
    settings = DisasmSettings()
    assert settings.show_pc
    assert not settings.show_raw
    assert settings.byteorder == 'little'
    assert settings.resolve_builtins


def test_update_ignores_none():
    settings = DisasmSettings().update(show_raw=True).update(show_raw=None)
    assert settings.show_raw


def test_bad_byteorder():
    with pytest.raises(UserWarning):
        DisasmSettings().update(byteorder='middle')


def test_load_settings():
    settings = load_settings(unit_utils.find_file('testdata/disasm/settings.toml'))
    assert not settings.show_pc
    assert settings.show_raw
    assert settings.byteorder == 'big'
    assert not settings.resolve_builtins


def test_non_bool_flag_rejected():
    with pytest.raises(UserWarning):
        DisasmSettings().update(show_raw=1)  # type: ignore


def test_load_settings_rejects_string_flag(tmp_path):
    config = tmp_path / 'settings.toml'
    config.write_text('[disasm]\nshow_pc = "no"\n')

    with pytest.raises(UserWarning):
        load_settings(config)
