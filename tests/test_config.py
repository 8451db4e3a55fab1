import json
import sys
import types

import pytest

from specmap import config
from specmap.errors import SpecMapIOError


def test_load_config_returns_defaults_when_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = config.load_config()

    assert result == {
        "requirements_file": "",
        "spec_map_output": "docs/specifications-map.md",
        "store": False,
        "call_token": "patrolTest",
    }


def test_load_config_reads_yaml(tmp_path):
    cfg = tmp_path / ".specmap.yml"
    cfg.write_text("requirements_file: docs/requirements.md\nstore: true\n", encoding="utf-8")

    result = config.load_config(str(cfg))

    assert result["requirements_file"] == "docs/requirements.md"
    assert result["store"] is True
    assert result["call_token"] == "patrolTest"


def test_load_config_merges_json_and_drops_unknown_keys(tmp_path):
    cfg = tmp_path / "specmap.json"
    cfg.write_text(json.dumps({"call_token": "integrationTest", "colour": "red"}), encoding="utf-8")

    result = config.load_config(str(cfg))

    assert result["call_token"] == "integrationTest"
    assert "colour" not in result


def test_load_config_falls_back_to_pyyaml(tmp_path, monkeypatch):
    cfg = tmp_path / ".specmap.yml"
    cfg.write_text("store: true\n", encoding="utf-8")

    # ruamel.yaml importable but failing at load()
    fake_ruamel = types.ModuleType("ruamel")
    fake_ruamel_yaml = types.ModuleType("ruamel.yaml")

    class ExplodingYAML:
        def __init__(self, *_, **__):
            pass

        def load(self, _):
            raise RuntimeError("boom")

    fake_ruamel_yaml.YAML = ExplodingYAML
    fake_ruamel.yaml = fake_ruamel_yaml

    fake_yaml = types.ModuleType("yaml")
    fake_yaml.safe_load = lambda text: {"spec_map_output": "out/map.md"}

    monkeypatch.setitem(sys.modules, "ruamel", fake_ruamel)
    monkeypatch.setitem(sys.modules, "ruamel.yaml", fake_ruamel_yaml)
    monkeypatch.setitem(sys.modules, "yaml", fake_yaml)

    result = config.load_config(str(cfg))

    assert result["spec_map_output"] == "out/map.md"
    assert result["store"] is False


def test_load_config_invalid_file_warns_and_uses_defaults(tmp_path, caplog):
    cfg = tmp_path / "specmap.json"
    cfg.write_text("{not json", encoding="utf-8")

    result = config.load_config(str(cfg))

    assert result == config.default_config()
    assert "Ignoring invalid config" in caplog.text


def test_load_config_unreadable_path_raises(tmp_path):
    # a directory exists but cannot be read as a file
    with pytest.raises(SpecMapIOError):
        config.load_config(str(tmp_path))


def test_load_config_ignores_values_of_the_wrong_type(tmp_path, caplog):
    cfg = tmp_path / ".specmap.yml"
    cfg.write_text(
        'store: "false"\nspec_map_output:\ncall_token: patrolTest\nrequirements_file: reqs.md\n',
        encoding="utf-8",
    )

    result = config.load_config(str(cfg))

    assert result["store"] is False
    assert result["spec_map_output"] == "docs/specifications-map.md"
    assert result["requirements_file"] == "reqs.md"
    assert "store='false'" in caplog.text
    assert "spec_map_output=None" in caplog.text


def test_load_config_non_mapping_document_uses_defaults(tmp_path, caplog):
    cfg = tmp_path / "specmap.json"
    cfg.write_text('["store", true]', encoding="utf-8")

    result = config.load_config(str(cfg))

    assert result == config.default_config()
    assert "not a mapping" in caplog.text
