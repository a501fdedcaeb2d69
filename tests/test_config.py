"""Tests for buildenv.config module"""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from buildenv.config import (
    EnvironmentContext,
    EnvSettings,
    compute_paths,
    ensure_slash,
    read_homepage,
)
from buildenv.exceptions import ConfigurationError


class TestEnvSettings:
    """Tests for EnvSettings dataclass"""

    def test_default_values(self):
        settings = EnvSettings()
        assert settings.dotenv_name == ".env"
        assert settings.app_directory is None
        assert settings.mode_var == "NODE_ENV"
        assert settings.default_mode == "development"
        assert settings.module_path_var == "NODE_PATH"
        assert settings.namespace_prefix == "REACT_APP_"
        assert settings.public_url_var == "PUBLIC_URL"
        assert settings.no_local_modes == ("test",)

    def test_from_env_custom_prefix(self, tmp_path):
        with patch.dict(os.environ, {
            "MYAPP_DOTENV_NAME": ".config",
            "MYAPP_APP_DIR": str(tmp_path),
            "MYAPP_MODE_VAR": "APP_ENV",
            "MYAPP_NAMESPACE_PREFIX": "VITE_",
        }, clear=False):
            settings = EnvSettings.from_env(prefix="MYAPP")
        assert settings.dotenv_name == ".config"
        assert settings.app_directory == tmp_path
        assert settings.mode_var == "APP_ENV"
        assert settings.namespace_prefix == "VITE_"
        assert settings.module_path_var == "NODE_PATH"

    def test_from_env_defaults_when_unset(self):
        settings = EnvSettings.from_env(prefix="NONEXISTENT")
        assert settings == EnvSettings()

    @pytest.mark.parametrize("field", ["dotenv_name", "mode_var", "module_path_var", "namespace_prefix"])
    def test_empty_required_setting_raises(self, field):
        with pytest.raises(ConfigurationError) as exc_info:
            EnvSettings(**{field: ""})
        assert exc_info.value.code == "INVALID_SETTING"
        assert exc_info.value.details == {"setting": field}

    def test_string_app_directory_converted(self, tmp_path):
        settings = EnvSettings(app_directory=str(tmp_path))  # type: ignore[arg-type]
        assert isinstance(settings.app_directory, Path)

    def test_dotenv_path_uses_real_app_directory(self, tmp_path):
        real = tmp_path / "real"
        real.mkdir()
        link = tmp_path / "link"
        link.symlink_to(real)

        settings = EnvSettings(app_directory=link)
        assert settings.dotenv_path == Path(os.path.realpath(real)) / ".env"

    def test_namespace_pattern_is_case_insensitive_prefix(self):
        pattern = EnvSettings().namespace_pattern
        assert pattern.match("REACT_APP_API")
        assert pattern.match("react_app_api")
        assert not pattern.match("MY_REACT_APP_API")
        assert not pattern.match("REACT_APPX")

    def test_namespace_prefix_is_escaped(self):
        pattern = EnvSettings(namespace_prefix="A.B_").namespace_pattern
        assert pattern.match("A.B_X")
        assert not pattern.match("AXB_X")


class TestEnvironmentContext:
    """Tests for EnvironmentContext"""

    def test_set_default_only_writes_absent_keys(self):
        context = EnvironmentContext({"FOO": "env"})
        assert context.set_default("FOO", "file") is False
        assert context.set_default("BAR", "file") is True
        assert context.to_dict() == {"FOO": "env", "BAR": "file"}

    def test_set_default_keeps_empty_existing_value(self):
        context = EnvironmentContext({"FOO": ""})
        assert context.set_default("FOO", "file") is False
        assert context["FOO"] == ""

    def test_set_overwrites(self):
        context = EnvironmentContext({"NODE_PATH": "src"})
        context.set("NODE_PATH", "/abs/src")
        assert context.get("NODE_PATH") == "/abs/src"

    def test_wraps_mapping_by_reference(self):
        values = {}
        context = EnvironmentContext(values)
        context.set_default("FOO", "1")
        assert values == {"FOO": "1"}

    def test_to_dict_is_a_copy(self):
        context = EnvironmentContext({"FOO": "1"})
        snapshot = context.to_dict()
        snapshot["BAR"] = "2"
        assert "BAR" not in context

    def test_from_os_environ(self, monkeypatch):
        monkeypatch.setattr(os, "environ", {"NODE_ENV": "production"})
        context = EnvironmentContext.from_os_environ()
        context.set_default("REACT_APP_X", "1")
        assert os.environ["REACT_APP_X"] == "1"

    def test_require(self):
        context = EnvironmentContext({"NODE_ENV": "test", "EMPTY": ""})
        assert context.require("NODE_ENV") == "test"
        for key in ("EMPTY", "MISSING"):
            with pytest.raises(ConfigurationError) as exc_info:
                context.require(key)
            assert exc_info.value.code == "MISSING_ENV_VAR"
            assert key in exc_info.value.message

    def test_mapping_protocol(self):
        context = EnvironmentContext({"A": "1", "B": "2"})
        assert len(context) == 2
        assert list(context) == ["A", "B"]
        assert list(context.keys()) == ["A", "B"]
        assert dict(context.items()) == {"A": "1", "B": "2"}
        assert "A" in context


class TestEnsureSlash:
    """Tests for ensure_slash"""

    @pytest.mark.parametrize(
        "path,needs_slash,expected",
        [
            ("/app", True, "/app/"),
            ("/app/", True, "/app/"),
            ("/app/", False, "/app"),
            ("/app", False, "/app"),
            ("", True, "/"),
        ],
    )
    def test_ensure_slash(self, path, needs_slash, expected):
        assert ensure_slash(path, needs_slash) == expected


class TestComputePaths:
    """Tests for compute_paths and read_homepage"""

    def test_layout_relative_to_app_directory(self, tmp_path):
        paths = compute_paths(EnvironmentContext({}), EnvSettings(app_directory=tmp_path))
        root = Path(os.path.realpath(tmp_path))
        assert paths.app_directory == root
        assert paths.dotenv == root / ".env"
        assert paths.app_package_json == root / "package.json"
        assert paths.app_public == root / "public"
        assert paths.app_src == root / "src"
        assert paths.app_node_modules == root / "node_modules"

    def test_defaults_without_public_url_or_homepage(self, tmp_path):
        paths = compute_paths(EnvironmentContext({}), EnvSettings(app_directory=tmp_path))
        assert paths.public_url is None
        assert paths.served_path == "/"

    def test_homepage_path_is_served_path(self, tmp_path):
        (tmp_path / "package.json").write_text(json.dumps({"homepage": "https://example.com/my-app"}))
        paths = compute_paths(EnvironmentContext({}), EnvSettings(app_directory=tmp_path))
        assert paths.public_url == "https://example.com/my-app"
        assert paths.served_path == "/my-app/"

    def test_homepage_without_path(self, tmp_path):
        (tmp_path / "package.json").write_text(json.dumps({"homepage": "https://example.com"}))
        paths = compute_paths(EnvironmentContext({}), EnvSettings(app_directory=tmp_path))
        assert paths.served_path == "/"

    def test_public_url_from_context_wins(self, tmp_path):
        (tmp_path / "package.json").write_text(json.dumps({"homepage": "https://example.com/my-app"}))
        context = EnvironmentContext({"PUBLIC_URL": "https://cdn.example.com/static"})
        paths = compute_paths(context, EnvSettings(app_directory=tmp_path))
        assert paths.public_url == "https://cdn.example.com/static"
        assert paths.served_path == "https://cdn.example.com/static/"

    def test_read_homepage_missing_field(self, tmp_path):
        package_json = tmp_path / "package.json"
        package_json.write_text(json.dumps({"name": "app"}))
        assert read_homepage(package_json) is None
        assert read_homepage(tmp_path / "absent.json") is None

    def test_read_homepage_invalid_json(self, tmp_path):
        package_json = tmp_path / "package.json"
        package_json.write_text("{not json")
        with pytest.raises(ConfigurationError) as exc_info:
            read_homepage(package_json)
        assert exc_info.value.code == "INVALID_PACKAGE_JSON"

    def test_non_utf8_manifest_is_invalid(self, tmp_path):
        (tmp_path / "package.json").write_bytes(b'{"homepage": "\xff\xfe"}')
        with pytest.raises(ConfigurationError) as exc_info:
            compute_paths(EnvironmentContext({}), EnvSettings(app_directory=tmp_path))
        assert exc_info.value.code == "INVALID_PACKAGE_JSON"

    def test_unreadable_manifest_has_no_homepage(self, tmp_path):
        (tmp_path / "package.json").write_text(json.dumps({"homepage": "https://example.com/app"}))

        def deny(self):
            raise PermissionError(13, "Permission denied", str(self))

        with patch.object(Path, "read_bytes", deny):
            paths = compute_paths(EnvironmentContext({}), EnvSettings(app_directory=tmp_path))
        assert paths.public_url is None
        assert paths.served_path == "/"
