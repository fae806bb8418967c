"""
Tests for contract loading — YAML parsing and required fields.
"""

import textwrap
from pathlib import Path

import pytest

from seamgen.core.config.contract_loader import (
    contract_filename,
    find_contract,
    find_contract_files,
    load_contract,
)
from seamgen.core.errors import ContractParseError, ContractSchemaError


def _write(directory: Path, name: str, content: str) -> Path:
    path = directory / name
    path.write_text(textwrap.dedent(content))
    return path


class TestLoadContract:
    def test_load_valid(self, valid_contract_file: Path):
        contract = load_contract(valid_contract_file)
        assert contract.name == "UserSeam"
        assert contract.version == "v1"
        assert contract.category == "api"
        assert len(contract.examples) == 1
        assert contract.examples[0].input["userId"] == "123"

    def test_error_descriptors(self, valid_contract_file: Path):
        contract = load_contract(valid_contract_file)
        err = contract.errors[0]
        assert err.code == "USER_NOT_FOUND"
        assert err.http_status == 404
        assert err.retryable is False

    def test_dependencies_default_empty(self, valid_contract_file: Path):
        assert load_contract(valid_contract_file).dependencies == []

    def test_legacy_example_keys(self, contracts_dir: Path):
        path = _write(contracts_dir, "Legacy.contract.v1.yml", """\
            name: Legacy
            version: v1
            examples:
              - in: {a: 1}
                out: {b: 2}
        """)
        example = load_contract(path).examples[0]
        assert example.input == {"a": 1}
        assert example.output == {"b": 2}

    def test_numeric_version_coerced(self, contracts_dir: Path):
        path = _write(contracts_dir, "Num.contract.1.yml", """\
            name: Num
            version: 1
            examples:
              - input: {}
                output: {}
        """)
        assert load_contract(path).version == "1"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ContractParseError, match="Cannot read"):
            load_contract(tmp_path / "nope.contract.v1.yml")

    def test_invalid_yaml(self, contracts_dir: Path):
        path = _write(contracts_dir, "Bad.contract.v1.yml", ":: invalid: yaml: [")
        with pytest.raises(ContractParseError) as exc:
            load_contract(path)
        assert exc.value.code == "PARSE_ERROR"

    def test_not_a_mapping(self, contracts_dir: Path):
        path = _write(contracts_dir, "List.contract.v1.yml", "- a\n- b\n")
        with pytest.raises(ContractParseError, match="Expected a YAML mapping"):
            load_contract(path)

    def test_missing_examples(self, contracts_dir: Path):
        path = _write(contracts_dir, "NoEx.contract.v1.yml", """\
            name: NoEx
            version: v1
        """)
        with pytest.raises(ContractSchemaError) as exc:
            load_contract(path)
        assert exc.value.code == "SCHEMA_INVALID"
        assert exc.value.details["fields"] == ["examples"]

    def test_empty_examples(self, contracts_dir: Path):
        path = _write(contracts_dir, "Empty.contract.v1.yml", """\
            name: Empty
            version: v1
            examples: []
        """)
        with pytest.raises(ContractSchemaError, match="examples"):
            load_contract(path)

    def test_missing_name_and_version(self, contracts_dir: Path):
        path = _write(contracts_dir, "Anon.contract.v1.yml", """\
            description: nameless
            examples:
              - input: {}
                output: {}
        """)
        with pytest.raises(ContractSchemaError) as exc:
            load_contract(path)
        assert exc.value.details["fields"] == ["name", "version"]

    def test_invalid_category(self, contracts_dir: Path):
        path = _write(contracts_dir, "Cat.contract.v1.yml", """\
            name: Cat
            version: v1
            category: spaceship
            examples:
              - input: {}
                output: {}
        """)
        with pytest.raises(ContractSchemaError, match="Invalid contract"):
            load_contract(path)


class TestContractFiles:
    def test_filename_convention(self):
        assert contract_filename("UserSeam", "v2") == "UserSeam.contract.v2.yml"

    def test_find_files_sorted(self, contracts_dir: Path):
        (contracts_dir / "b.contract.v1.yml").write_text("x: 1")
        (contracts_dir / "a.contract.v1.yaml").write_text("x: 1")
        (contracts_dir / "notes.txt").write_text("ignored")
        names = [p.name for p in find_contract_files(contracts_dir)]
        assert names == ["a.contract.v1.yaml", "b.contract.v1.yml"]

    def test_find_files_missing_dir(self, tmp_path: Path):
        assert find_contract_files(tmp_path / "missing") == []

    def test_find_contract(self, valid_contract_file: Path, contracts_dir: Path):
        assert find_contract(contracts_dir, "UserSeam", "v1") == valid_contract_file
        assert find_contract(contracts_dir, "UserSeam", "v9") is None
