import logging

import pytest

from chat_gateway.models.config import ConfigError, GatewayConfig, load_config


VALID_CONFIG = """
endpoints:
  openAI:
    type: openai
    models:
      default: ["gpt-4o", "gpt-4o-mini"]
    settings:
      api_key_env: OPENAI_API_KEY
  anthropic:
    models:
      default: ["claude-3-5-haiku-latest"]

modelSpecs:
  enforce: true
  list:
    - name: fast-chat
      label: Fast chat
      iconURL: https://example.com/icon.png
      preset:
        endpoint: openAI
        model: gpt-4o-mini
        temperature: 0.2
    - name: plugins
      preset:
        endpoint: gptPlugins
        tools: ["calculator"]
"""


class TestLoadConfig:

    @pytest.fixture
    def config_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(VALID_CONFIG)
        return path

    def test_loads_endpoints_and_specs(self, config_file):
        config = load_config(config_file)

        assert set(config.endpoints) == {"openAI", "anthropic"}
        assert config.endpoints["openAI"].type == "openai"
        assert config.endpoints["anthropic"].type == "static"
        assert config.endpoints["anthropic"].models.fetch is False

        specs = config.model_specs
        assert specs.enforce is True
        assert specs.enforced is True
        assert [s.name for s in specs.specs] == ["fast-chat", "plugins"]
        assert specs.specs[0].icon_url == "https://example.com/icon.png"

    def test_preset_keeps_conversation_fields(self, config_file):
        preset = load_config(config_file).model_specs.find("fast-chat").preset

        assert preset.to_conversation() == {"endpoint": "openAI", "model": "gpt-4o-mini", "temperature": 0.2}

    def test_preset_tools(self, config_file):
        preset = load_config(config_file).model_specs.find("plugins").preset
        assert preset.tools == ["calculator"]

    def test_env_var_path(self, config_file, monkeypatch):
        monkeypatch.setenv("CHAT_GATEWAY_CONFIG", str(config_file))
        assert "openAI" in load_config().endpoints

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_missing_endpoints(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("modelSpecs:\n  enforce: false\n")
        with pytest.raises(ConfigError, match="endpoints"):
            load_config(path)

    def test_invalid_endpoint_type(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("endpoints:\n  openAI:\n    type: grpc\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_spec_without_preset_endpoint(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("endpoints: {}\nmodelSpecs:\n  list:\n    - name: x\n      preset: {model: m}\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_duplicate_spec_names_warn(self, tmp_path, caplog):
        path = tmp_path / "config.yaml"
        path.write_text(
            "endpoints: {}\n"
            "modelSpecs:\n"
            "  list:\n"
            "    - {name: dup, preset: {endpoint: openAI, temperature: 0.1}}\n"
            "    - {name: dup, preset: {endpoint: openAI, temperature: 0.9}}\n"
        )
        with caplog.at_level(logging.WARNING):
            config = load_config(path)

        assert "dup" in caplog.text
        assert config.model_specs.find("dup").preset.to_conversation()["temperature"] == 0.1


class TestModelSpecsConfig:

    def test_empty_list_still_enforced(self):
        """
        Test: An enforced catalog with an empty spec list stays enforced
        How: Validate modelSpecs with enforce true and list []
        Ensures: Clients cannot bypass enforcement when no spec is listed
        """
        config = GatewayConfig.model_validate({"modelSpecs": {"enforce": True, "list": []}})
        assert config.model_specs.specs == []
        assert config.model_specs.enforced is True
        assert config.model_specs.find("anything") is None
        assert config.model_specs.duplicate_names() == []

    def test_missing_list_disables_enforcement(self):
        config = GatewayConfig.model_validate({"modelSpecs": {"enforce": True}})
        assert config.model_specs.specs is None
        assert config.model_specs.enforced is False
        assert config.model_specs.find("anything") is None

    def test_load_config_distinguishes_missing_and_empty_list(self, tmp_path):
        missing = tmp_path / "missing.yaml"
        missing.write_text("endpoints: {}\nmodelSpecs:\n  enforce: true\n")
        empty = tmp_path / "empty.yaml"
        empty.write_text("endpoints: {}\nmodelSpecs:\n  enforce: true\n  list: []\n")

        assert load_config(missing).model_specs.enforced is False
        assert load_config(empty).model_specs.enforced is True

    def test_absent_specs(self):
        assert GatewayConfig.model_validate({"endpoints": {}}).model_specs is None
