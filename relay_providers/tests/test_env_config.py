from __future__ import annotations

import json

from relay_providers.config import get_model, get_provider_config, reset_config_cache
from relay_providers.config.defaults import ONEAPI_DEFAULT_BASE_URL, ONEAPI_DEFAULT_MODEL
from relay_providers.config.env import (
    ENV_ALIASES,
    ENV_MAP,
    get_env_var_candidates,
    get_env_var_name,
    is_placeholder,
    resolve_provider_key,
)


def test_env_map_and_aliases():
    assert ENV_MAP["oneapi"] == "ONEAPI_API_KEY"  # nosec B101
    assert get_env_var_name("OneAPI") == "ONEAPI_API_KEY"  # nosec B101
    assert ENV_ALIASES["oneapi"][0] == "ONEAPI_API_KEY"  # nosec B101
    assert list(get_env_var_candidates("oneapi")) == ["ONEAPI_API_KEY", "OPENAI_KEY"]  # nosec B101
    assert get_env_var_name("unknown") is None  # nosec B101


def test_is_placeholder_heuristics():
    assert is_placeholder("placeholder-value")  # nosec B101
    assert is_placeholder("ChangeMe123")  # nosec B101
    assert is_placeholder("example-key")  # nosec B101
    assert is_placeholder("test_token")  # nosec B101
    assert not is_placeholder("real-value")  # nosec B101
    assert not is_placeholder(None)  # nosec B101


def test_resolve_provider_key_prefers_canonical(monkeypatch):
    monkeypatch.setenv("ONEAPI_API_KEY", "canon")
    monkeypatch.setenv("OPENAI_KEY", "alias")
    assert resolve_provider_key("oneapi") == ("canon", "ONEAPI_API_KEY")  # nosec B101


def test_resolve_provider_key_falls_back_to_alias(monkeypatch):
    monkeypatch.setenv("OPENAI_KEY", "alias")
    assert resolve_provider_key("oneapi") == ("alias", "OPENAI_KEY")  # nosec B101
    assert resolve_provider_key("nobody") == (None, None)  # nosec B101


def test_defaults_without_env():
    cfg = get_provider_config("oneapi")
    assert cfg["base_url"] == ONEAPI_DEFAULT_BASE_URL  # nosec B101
    assert cfg["model"] == ONEAPI_DEFAULT_MODEL  # nosec B101
    assert "api_key" not in cfg  # nosec B101
    assert get_model("oneapi") == ONEAPI_DEFAULT_MODEL  # nosec B101


def test_merge_order_file_env_overrides(monkeypatch, tmp_path):
    cfg_file = tmp_path / "relay.json"
    cfg_file.write_text(json.dumps({"oneapi": {"base_url": "https://file.test", "proxy": "http://proxy.file:1"}}))
    monkeypatch.setenv("RELAY_CONFIG_FILE", str(cfg_file))
    monkeypatch.setenv("ONEAPI_PROXY", "http://proxy.env:2")
    reset_config_cache()

    cfg = get_provider_config("oneapi", overrides={"model": "gpt-4", "api_key": None})
    assert cfg["base_url"] == "https://file.test"  # nosec B101
    assert cfg["proxy"] == "http://proxy.env:2"  # nosec B101
    assert cfg["model"] == "gpt-4"  # nosec B101
    assert "api_key" not in cfg  # nosec B101


def test_yaml_config_file(monkeypatch, tmp_path):
    cfg_file = tmp_path / "relay.yaml"
    cfg_file.write_text("oneapi:\n  base_url: https://yaml.test\n  api_key: k1|k2\n")
    monkeypatch.setenv("RELAY_CONFIG_FILE", str(cfg_file))
    reset_config_cache()
    cfg = get_provider_config("oneapi")
    assert cfg["base_url"] == "https://yaml.test"  # nosec B101
    assert cfg["api_key"] == "k1|k2"  # nosec B101


def test_dotenv_loaded_once(monkeypatch, tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text("# comment\nONEAPI_BASE_URL='https://dotenv.test'\nONEAPI_API_KEY=from-dotenv\n")
    monkeypatch.setenv("DOTENV_FILE", str(dotenv))
    monkeypatch.setenv("ONEAPI_API_KEY", "placeholder")
    monkeypatch.setenv("ONEAPI_BASE_URL", "placeholder")
    reset_config_cache()
    cfg = get_provider_config("oneapi")
    assert cfg["base_url"] == "https://dotenv.test"  # nosec B101
    assert cfg["api_key"] == "from-dotenv"  # nosec B101
