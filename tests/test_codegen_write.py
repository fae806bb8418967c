"""
Tests for writing generated files to disk.
"""

from pathlib import Path

from seamgen.core.services.codegen_write import write_generated_files
from seamgen.core.services.generators.packaging import package_file


class TestWriteGeneratedFiles:
    def test_writes_under_root(self, tmp_path: Path):
        files = [package_file("src/generated/A.ts", "export {}", "typescript")]
        result = write_generated_files(tmp_path, files)
        assert result["ok"] is True
        assert result["written"] == ["src/generated/A.ts"]
        assert (tmp_path / "src" / "generated" / "A.ts").read_text() == "export {}"

    def test_preview_files_skipped(self, tmp_path: Path):
        files = [package_file("[PREVIEW] src/generated/A.ts", "x", "typescript")]
        result = write_generated_files(tmp_path, files)
        assert result["ok"] is True
        assert result["skipped"] == ["[PREVIEW] src/generated/A.ts"]
        assert list(tmp_path.iterdir()) == []

    def test_existing_file_kept(self, tmp_path: Path):
        target = tmp_path / "A.md"
        target.write_text("original")
        result = write_generated_files(tmp_path, [package_file("A.md", "new", "markdown")])
        assert result["ok"] is False
        assert "already exists" in result["errors"][0]
        assert target.read_text() == "original"

    def test_overwrite(self, tmp_path: Path):
        target = tmp_path / "A.md"
        target.write_text("original")
        result = write_generated_files(
            tmp_path, [package_file("A.md", "new", "markdown")], overwrite=True,
        )
        assert result["ok"] is True
        assert target.read_text() == "new"

    def test_refuses_escape(self, tmp_path: Path):
        root = tmp_path / "project"
        root.mkdir()
        result = write_generated_files(root, [package_file("../evil.ts", "x", "typescript")])
        assert result["ok"] is False
        assert "outside project root" in result["errors"][0]
        assert not (tmp_path / "evil.ts").exists()

    def test_partial_success(self, tmp_path: Path):
        (tmp_path / "B.md").write_text("keep")
        files = [
            package_file("A.md", "a", "markdown"),
            package_file("B.md", "b", "markdown"),
        ]
        result = write_generated_files(tmp_path, files)
        assert result["written"] == ["A.md"]
        assert len(result["errors"]) == 1
