"""
Tests for output packaging — checksums, sizes, statistics.
"""

import hashlib

import pytest

from seamgen.core.services.generators.packaging import (
    build_statistics,
    checksum,
    complexity_score,
    contract_hash,
    lint_score,
    package_file,
)


class TestChecksum:
    def test_known_digests(self):
        assert checksum("") == "d41d8cd98f00b204e9800998ecf8427e"
        assert checksum("hello") == "5d41402abc4b2a76b9719d911017c592"

    def test_utf8_encoding(self):
        assert checksum("é") == hashlib.md5("é".encode("utf-8")).hexdigest()


class TestPackageFile:
    def test_counts(self):
        f = package_file("a/b.ts", "one\ntwo\nthree", "typescript")
        assert f.path == "a/b.ts"
        assert f.lines == 3
        assert f.size == 13
        assert f.type == "typescript"

    def test_trailing_newline_counts_a_line(self):
        assert package_file("x", "a\n", "markdown").lines == 2

    def test_empty_content(self):
        f = package_file("x", "", "markdown")
        assert f.lines == 1
        assert f.size == 0

    def test_size_is_bytes(self):
        assert package_file("x", "héllo", "markdown").size == 6

    def test_with_path_keeps_content(self):
        f = package_file("a.ts", "x", "typescript")
        moved = f.with_path("[PREVIEW] a.ts")
        assert moved.path == "[PREVIEW] a.ts"
        assert moved.checksum == f.checksum
        assert f.path == "a.ts"


class TestContractHash:
    def test_key_order_independent(self):
        a = {"name": "X", "inputs": {"b": 1, "a": 2}}
        b = {"inputs": {"a": 2, "b": 1}, "name": "X"}
        assert contract_hash(a) == contract_hash(b)

    def test_value_sensitive(self):
        assert contract_hash({"name": "X"}) != contract_hash({"name": "Y"})

    def test_is_sha256(self):
        assert len(contract_hash({})) == 64


class TestScores:
    @pytest.mark.parametrize("operation, expected", [
        ("generate_stub", 1.0),
        ("generate_blueprint", 1.0),
        ("generate_test", 1.0),
        ("preview", 1.0),
        ("generate_all", 2.0),
        ("validate_template", 0.0),
    ])
    def test_complexity(self, operation, expected):
        assert complexity_score(operation) == expected

    def test_lint_score_constant(self):
        assert lint_score() == 100


class TestStatistics:
    def test_aggregates(self):
        files = [
            package_file("a.ts", "1\n2", "typescript"),
            package_file("b.md", "x", "markdown"),
            package_file("c.ts", "y", "typescript"),
        ]
        stats = build_statistics(files, "generate_all")
        assert stats.total_files == 3
        assert stats.total_lines == 4
        assert stats.total_size == 5
        assert stats.files_by_type == {"typescript": 2, "markdown": 1}
        assert stats.complexity_score == 2.0

    def test_empty(self):
        stats = build_statistics([], "validate_template")
        assert stats.total_files == 0
        assert stats.files_by_type == {}
