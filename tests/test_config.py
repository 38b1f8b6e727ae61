"""
Tests for config file loading and the standard library list.
"""

import pytest

from goisort.config import DEFAULT_CFG_FILE, load_config, resolve_settings
from goisort.errors import ConfigError
from goisort.stdlib import GO_STDLIB, load_stdlib

from .conftest import write


class TestLoadConfig:

    def test_missing_file_gives_defaults(self, tmp_path):
        cfg = load_config(tmp_path / DEFAULT_CFG_FILE)
        assert cfg["local_package"] == ""
        assert cfg["write"] is False

    def test_values(self, tmp_path):
        path = write(tmp_path / DEFAULT_CFG_FILE, "local_package: github.com/me/proj\nwrite: true\n")
        cfg = load_config(path)
        assert cfg["local_package"] == "github.com/me/proj"
        assert cfg["write"] is True

    def test_unknown_key(self, tmp_path):
        path = write(tmp_path / DEFAULT_CFG_FILE, "local_pkg: x\n")
        with pytest.raises(ConfigError, match="unknown keys: local_pkg"):
            load_config(path)

    def test_wrong_type(self, tmp_path):
        path = write(tmp_path / DEFAULT_CFG_FILE, "write: [1]\n")
        with pytest.raises(ConfigError, match="write"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = write(tmp_path / DEFAULT_CFG_FILE, "- a\n- b\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_stdlib_file_relative_to_config(self, tmp_path):
        path = write(tmp_path / "cfg" / "goisort.yaml", "stdlib_file: std.txt\n")
        cfg = load_config(path)
        assert cfg["stdlib_file"] == str((tmp_path / "cfg" / "std.txt").resolve())


class TestResolveSettings:

    def test_cli_overrides_file(self, tmp_path):
        path = write(tmp_path / "goisort.yaml", "local_package: from/file\n")
        settings = resolve_settings(path, local_package="from/cli", write=True)
        assert settings.local_package == "from/cli"
        assert settings.write is True

    def test_file_value_kept_when_flag_absent(self, tmp_path):
        path = write(tmp_path / "goisort.yaml", "local_package: from/file\nwrite: true\n")
        settings = resolve_settings(path, local_package=None, write=False)
        assert settings.local_package == "from/file"
        assert settings.write is True

    def test_explicit_missing_config(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            resolve_settings(tmp_path / "absent.yaml")

    def test_default_stdlib(self, tmp_path):
        path = write(tmp_path / "goisort.yaml", "{}\n")
        assert resolve_settings(path).stdlib() is GO_STDLIB

    def test_extra_stdlib(self, tmp_path):
        path = write(tmp_path / "goisort.yaml", "extra_stdlib: [iter, unique]\n")
        std = resolve_settings(path).stdlib()
        assert "iter" in std and "unique" in std and "fmt" in std


class TestLoadStdlib:

    def test_go_list_std_output(self, tmp_path):
        path = write(tmp_path / "std.txt", "# go1.23\nfmt\n\niter\ninternal/abi\nvendor/golang.org/x/net/idna\nnet/http/internal\n")
        assert load_stdlib(path) == frozenset({"fmt", "iter"})

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_stdlib(tmp_path / "none.txt")

    def test_bundled_set(self):
        assert {"fmt", "strings", "net/http", "encoding/json"} <= GO_STDLIB
        assert not any(pkg.startswith("internal/") for pkg in GO_STDLIB)
