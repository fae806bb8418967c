"""
Tests for the configuration loader — seamgen.yml and environment overrides.
"""

from pathlib import Path

import pytest

from seamgen.core.config.loader import (
    ConfigError,
    find_config_file,
    load_config,
    load_context,
)
from seamgen.core.context import DEFAULT_TEMPLATES_DIR, GeneratorContext


class TestFindConfigFile:
    def test_in_start_dir(self, tmp_path: Path):
        (tmp_path / "seamgen.yml").write_text("{}")
        assert find_config_file(tmp_path) == (tmp_path / "seamgen.yml").resolve()

    def test_walks_up(self, tmp_path: Path):
        (tmp_path / "seamgen.yml").write_text("{}")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(nested) == (tmp_path / "seamgen.yml").resolve()

    def test_not_found(self, tmp_path: Path):
        assert find_config_file(tmp_path) is None


class TestLoadConfig:
    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "seamgen.yml")

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "seamgen.yml"
        path.write_text("")
        config = load_config(path)
        assert config.contracts_dir == "contracts"
        assert config.stub_dir == "src/generated"
        assert config.missing_placeholder == "empty"

    def test_wrapped_under_key(self, tmp_path: Path):
        path = tmp_path / "seamgen.yml"
        path.write_text("seamgen:\n  stub_dir: out/stubs\n")
        assert load_config(path).stub_dir == "out/stubs"

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "seamgen.yml"
        path.write_text("a: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "seamgen.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_invalid_value(self, tmp_path: Path):
        path = tmp_path / "seamgen.yml"
        path.write_text("missing_placeholder: shout\n")
        with pytest.raises(ConfigError, match="Invalid generator configuration"):
            load_config(path)


class TestLoadContext:
    def test_defaults_without_config(self, tmp_path: Path):
        ctx = load_context(start_dir=tmp_path)
        assert ctx.root == tmp_path.resolve()
        assert ctx.templates_dir == DEFAULT_TEMPLATES_DIR
        assert ctx.contracts_dir == tmp_path.resolve() / "contracts"

    def test_from_file(self, tmp_path: Path):
        path = tmp_path / "seamgen.yml"
        path.write_text(
            "templates_dir: my-templates\n"
            "contracts_dir: specs\n"
            "blueprint_dir: docs/blueprints\n"
            "missing_placeholder: keep\n"
        )
        ctx = load_context(path)
        root = tmp_path.resolve()
        assert ctx.root == root
        assert ctx.templates_dir == root / "my-templates"
        assert ctx.contracts_dir == root / "specs"
        assert ctx.blueprint_dir == "docs/blueprints"
        assert ctx.missing_placeholder == "keep"

    def test_env_overrides(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        path = tmp_path / "seamgen.yml"
        path.write_text("templates_dir: from-file\n")
        other = tmp_path / "elsewhere"
        monkeypatch.setenv("SEAMGEN_TEMPLATES_DIR", str(other))
        monkeypatch.setenv("SEAMGEN_CONTRACTS_DIR", "env-contracts")
        ctx = load_context(path)
        assert ctx.templates_dir == other
        assert ctx.contracts_dir == tmp_path.resolve() / "env-contracts"

    def test_invalid_config_raises(self, tmp_path: Path):
        path = tmp_path / "seamgen.yml"
        path.write_text("stub_dir: [1, 2]\n")
        with pytest.raises(ConfigError):
            load_context(path)


class TestGeneratorContext:
    def test_default(self, tmp_path: Path):
        ctx = GeneratorContext.default(tmp_path)
        assert ctx.root == tmp_path.resolve()
        assert ctx.contracts_path == tmp_path.resolve() / "contracts"
        assert ctx.templates_dir == DEFAULT_TEMPLATES_DIR

    def test_packaged_templates_present(self):
        names = {p.name for p in DEFAULT_TEMPLATES_DIR.glob("*.template")}
        assert {
            "typescript_stub.ts.template",
            "blueprint.md.template",
            "test.spec.ts.template",
        } <= names

    def test_contract_ref_relative(self, tmp_path: Path):
        ctx = GeneratorContext(root=tmp_path, contracts_dir=tmp_path / "contracts")
        assert ctx.contract_ref("A.contract.v1.yml") == "contracts/A.contract.v1.yml"

    def test_contract_ref_outside_root(self, tmp_path: Path):
        outside = tmp_path / "outside"
        ctx = GeneratorContext(root=tmp_path / "root", contracts_dir=outside)
        assert ctx.contract_ref("A.contract.v1.yml") == (outside / "A.contract.v1.yml").as_posix()
