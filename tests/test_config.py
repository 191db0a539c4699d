import json

from dragonfly.utils.config import DEFAULT_CONFIG, Config


def test_defaults_without_file(tmp_path):
    config = Config(str(tmp_path / "missing.json"))

    assert config.get('layout.text_nodes') is True
    assert config.get('layout.font_size') == 14.0
    assert config.get('network.allow_local_fs') is True
    assert config.get('no.such.key', "fallback") == "fallback"


def test_file_is_merged_over_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"layout": {"text_nodes": False}, "extra": 1}))

    config = Config(str(path))

    assert config.get('layout.text_nodes') is False
    assert config.get('layout.font_size') == 14.0
    assert config.get('extra') == 1


def test_invalid_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    assert Config(str(path)).get_all() == DEFAULT_CONFIG


def test_set_remove_and_save(tmp_path):
    path = tmp_path / "nested" / "config.json"
    config = Config(str(path))

    config.set('fonts.cache_fonts', False)
    config.set('custom.deep.value', 3)
    assert config.get('custom.deep.value') == 3
    assert config.remove('custom.deep.value') is True
    assert config.remove('custom.deep.value') is False
    config.save()

    reloaded = Config(str(path))
    assert reloaded.get('fonts.cache_fonts') is False
    assert reloaded.get('custom') == {"deep": {}}


def test_get_all_is_a_copy():
    config = Config.defaults()
    config.get_all()["layout"]["text_nodes"] = False
    assert config.get('layout.text_nodes') is True
