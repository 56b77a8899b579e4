import pytest
import yaml

import config
from core.layout import LayoutSettings


@pytest.fixture
def user_cfg(tmp_path, monkeypatch):
    path = tmp_path / "user_config.yaml"
    monkeypatch.setattr(config, "USER_CONFIG_PATH", path)
    return path


def test_defaults_without_file(user_cfg):
    assert config.get_api_url() == config.DEFAULT_API_URL
    assert config.get_user_token() == ""
    assert config.get_theme() == config.DEFAULT_THEME
    assert config.get_layout_settings() == LayoutSettings()


def test_set_and_clear_values(user_cfg):
    config.set_api_url(" http://threadcast/api ")
    config.set_user_token("secret")
    assert config.get_api_url() == "http://threadcast/api"
    assert yaml.safe_load(user_cfg.read_text())["token"] == "secret"
    config.set_user_token("")
    assert config.get_user_token() == ""
    config.set_api_url("")
    assert not user_cfg.exists()


def test_layout_section(user_cfg):
    user_cfg.write_text("layout:\n  node_width: 160\n  vertical_gap: -4\n", encoding="utf-8")
    settings = config.get_layout_settings()
    assert settings.node_width == 160
    assert settings.vertical_gap == 30


def test_broken_file_falls_back(user_cfg):
    user_cfg.write_text("layout: [unclosed\n", encoding="utf-8")
    assert config.get_theme() == config.DEFAULT_THEME
    user_cfg.write_text("- just\n- a list\n", encoding="utf-8")
    assert config.get_layout_settings() == LayoutSettings()
