"""Tests for the config loader."""

from pathlib import Path
from unittest.mock import patch

import pytest

from pykpathsea.config.loader import (
    ConfigSource,
    KpathseaConfig,
    _find_project_config,
    _get_tex_path_from_yaml,
    _get_user_config_path,
    _load_yaml_config,
    _parse_timeout,
    _resolve_config,
    clear_config_cache,
    get_config,
)


class TestConfigSource:
    def test_config_source_values(self):
        assert ConfigSource.ENV.value == "env"
        assert ConfigSource.PROJECT.value == "project"
        assert ConfigSource.USER.value == "user"
        assert ConfigSource.DEFAULT.value == "default"


class TestKpathseaConfig:
    def test_defaults(self):
        config = KpathseaConfig()
        assert config.tex_path is None
        assert config.timeout is None
        assert config.source == ConfigSource.DEFAULT

    def test_repr(self):
        config = KpathseaConfig(tex_path=Path("/tex/bin"), source=ConfigSource.USER)
        repr_str = repr(config)
        assert "tex_path=" in repr_str
        assert "source='user'" in repr_str

    def test_is_frozen(self):
        config = KpathseaConfig()
        with pytest.raises(AttributeError):
            config.timeout = 3  # type: ignore


class TestLoadYamlConfig:
    def test_load_nonexistent_file(self, tmp_path):
        assert _load_yaml_config(tmp_path / "nonexistent.yaml") is None

    def test_load_valid_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("tex_path: /tex/bin\ntimeout: 5\n")
        assert _load_yaml_config(config_file) == {"tex_path": "/tex/bin", "timeout": 5}

    def test_load_empty_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        assert _load_yaml_config(config_file) == {}

    def test_load_invalid_yaml_type(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- item1\n- item2\n")
        assert _load_yaml_config(config_file) is None

    def test_load_malformed_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("tex_path: [unclosed\n")
        assert _load_yaml_config(config_file) is None


class TestGetTexPathFromYaml:
    def test_none_config(self):
        assert _get_tex_path_from_yaml(None) is None

    def test_missing_key(self):
        assert _get_tex_path_from_yaml({"timeout": 3}) is None

    def test_absolute(self):
        assert _get_tex_path_from_yaml({"tex_path": "/tex/bin"}) == Path("/tex/bin")

    def test_expands_tilde(self):
        assert _get_tex_path_from_yaml({"tex_path": "~/tex"}) == Path.home() / "tex"

    def test_relative_to_config_file(self, tmp_path):
        config_path = tmp_path / ".pykpathsea" / "config.yaml"
        result = _get_tex_path_from_yaml({"tex_path": "bin"}, config_path)
        assert result == (tmp_path / ".pykpathsea" / "bin").resolve()


class TestParseTimeout:
    @pytest.mark.parametrize("value,expected", [(None, None), ("2.5", 2.5), (10, 10.0)])
    def test_valid(self, value, expected):
        assert _parse_timeout(value, "test") == expected

    @pytest.mark.parametrize("value", ["soon", 0, -1, [1]])
    def test_invalid_is_ignored(self, value):
        assert _parse_timeout(value, "test") is None


class TestFindProjectConfig:
    def test_finds_config_in_parent(self, tmp_path, monkeypatch):
        config_dir = tmp_path / ".pykpathsea"
        config_dir.mkdir()
        config_file = config_dir / "config.yaml"
        config_file.write_text("timeout: 1\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert _find_project_config() == config_file


class TestResolveConfig:
    def test_defaults(self, isolated_config):
        config = _resolve_config()
        assert config == KpathseaConfig()

    def test_user_config(self, isolated_config):
        (isolated_config / "config.yaml").write_text("tex_path: /tex/bin\ntimeout: 3\n")
        assert _get_user_config_path() == isolated_config / "config.yaml"
        config = _resolve_config()
        assert config.tex_path == Path("/tex/bin")
        assert config.timeout == 3.0
        assert config.source == ConfigSource.USER

    def test_project_overrides_user(self, isolated_config):
        (isolated_config / "config.yaml").write_text("tex_path: /user/bin\ntimeout: 3\n")
        project = Path.cwd() / ".pykpathsea"
        project.mkdir()
        (project / "config.yaml").write_text("tex_path: /project/bin\n")
        config = _resolve_config()
        assert config.tex_path == Path("/project/bin")
        assert config.timeout == 3.0
        assert config.source == ConfigSource.PROJECT

    def test_env_overrides_files(self, isolated_config, monkeypatch):
        (isolated_config / "config.yaml").write_text("tex_path: /user/bin\ntimeout: 3\n")
        monkeypatch.setenv("PYKPATHSEA_TEX_PATH", "/env/bin")
        monkeypatch.setenv("PYKPATHSEA_TIMEOUT", "7")
        config = _resolve_config()
        assert config.tex_path == Path("/env/bin")
        assert config.timeout == 7.0
        assert config.source == ConfigSource.ENV


class TestGetConfig:
    def test_cached_until_cleared(self, isolated_config, monkeypatch):
        first = get_config()
        assert get_config() is first
        monkeypatch.setenv("PYKPATHSEA_TIMEOUT", "9")
        assert get_config().timeout is None
        clear_config_cache()
        assert get_config().timeout == 9.0

    def test_resolves_once(self, isolated_config):
        with patch(
            "pykpathsea.config.loader._resolve_config", return_value=KpathseaConfig()
        ) as mock_resolve:
            get_config()
            get_config()
        assert mock_resolve.call_count == 1
