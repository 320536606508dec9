"""
Tests for tree adapters — real filesystem and in-memory tree.
"""

from pathlib import Path, PurePosixPath

import pytest

from agentland_docs.adapters import FilesystemAdapter, MemoryAdapter, TreeAdapter

# ── Filesystem Adapter Tests ────────────────────────────────────────


class TestFilesystemAdapter:
    def test_name(self):
        adapter = FilesystemAdapter()
        assert isinstance(adapter, TreeAdapter)
        assert adapter.name == "filesystem"
        assert "filesystem" in repr(adapter)

    def test_exists_and_is_dir(self, tmp_path: Path):
        (tmp_path / "a.txt").write_text("x")
        adapter = FilesystemAdapter()
        assert adapter.exists(tmp_path / "a.txt")
        assert not adapter.is_dir(tmp_path / "a.txt")
        assert adapter.is_dir(tmp_path)
        assert not adapter.exists(tmp_path / "missing")

    def test_list_dir_sorted(self, tmp_path: Path):
        for name in ("b", "a", "c"):
            (tmp_path / name).write_text(name)
        assert FilesystemAdapter().list_dir(tmp_path) == ["a", "b", "c"]

    def test_text_round_trip_keeps_crlf(self, tmp_path: Path):
        adapter = FilesystemAdapter()
        target = tmp_path / "doc.md"
        adapter.write_text(target, "one\r\ntwo\n")
        assert target.read_bytes() == b"one\r\ntwo\n"
        assert adapter.read_text(target) == "one\r\ntwo\n"

    def test_make_dirs_nested(self, tmp_path: Path):
        FilesystemAdapter().make_dirs(tmp_path / "a" / "b" / "c")
        assert (tmp_path / "a" / "b" / "c").is_dir()

    def test_copy_file(self, tmp_path: Path):
        (tmp_path / "src.bin").write_bytes(b"\x00\xffdata")
        FilesystemAdapter().copy_file(tmp_path / "src.bin", tmp_path / "dst.bin")
        assert (tmp_path / "dst.bin").read_bytes() == b"\x00\xffdata"

    def test_read_missing_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            FilesystemAdapter().read_bytes(tmp_path / "missing")


# ── Memory Adapter Tests ────────────────────────────────────────────


class TestMemoryAdapter:
    def test_seeding_creates_parents(self):
        tree = MemoryAdapter({"/a/b/c.txt": "hi"})
        assert tree.is_dir(PurePosixPath("/a/b"))
        assert tree.list_dir(PurePosixPath("/a")) == ["b"]
        assert tree.read_text(PurePosixPath("/a/b/c.txt")) == "hi"
        assert tree.write_log == []

    def test_list_dir_mixes_files_and_dirs(self):
        tree = MemoryAdapter({"/r/z.md": "", "/r/a/x.md": ""})
        assert tree.list_dir(PurePosixPath("/r")) == ["a", "z.md"]

    def test_write_records_log(self):
        tree = MemoryAdapter()
        tree.make_dirs(PurePosixPath("/out"))
        tree.write_bytes(PurePosixPath("/out/f"), b"1")
        assert tree.write_log == ["/out/f"]
        assert tree.files() == {"/out/f": b"1"}

    def test_write_without_parent_raises(self):
        with pytest.raises(FileNotFoundError):
            MemoryAdapter().write_bytes(PurePosixPath("/no/parent"), b"")

    def test_read_directory_raises(self):
        tree = MemoryAdapter({"/d/f": ""})
        with pytest.raises(IsADirectoryError):
            tree.read_bytes(PurePosixPath("/d"))

    def test_read_missing_raises(self):
        with pytest.raises(FileNotFoundError):
            MemoryAdapter().read_bytes(PurePosixPath("/missing"))

    def test_list_file_raises(self):
        tree = MemoryAdapter({"/f": ""})
        with pytest.raises(NotADirectoryError):
            tree.list_dir(PurePosixPath("/f"))

    def test_make_dirs_through_file_raises(self):
        tree = MemoryAdapter({"/f": ""})
        with pytest.raises(FileExistsError):
            tree.make_dirs(PurePosixPath("/f/sub"))

    def test_denied_write(self):
        tree = MemoryAdapter({"/f": "old"})
        tree.deny_writes("/f")
        with pytest.raises(PermissionError):
            tree.write_text(PurePosixPath("/f"), "new")
        assert tree.files()["/f"] == b"old"

    def test_copy_file_default_implementation(self):
        tree = MemoryAdapter({"/a": b"\x01\x02"})
        tree.copy_file(PurePosixPath("/a"), PurePosixPath("/b"))
        assert tree.files()["/b"] == b"\x01\x02"

    def test_read_text_rejects_invalid_utf8(self):
        tree = MemoryAdapter({"/latin1.md": b"Caf\xe9\n"})
        with pytest.raises(OSError) as exc:
            tree.read_text(PurePosixPath("/latin1.md"))
        assert exc.value.filename == "/latin1.md"
        assert isinstance(exc.value.__cause__, UnicodeDecodeError)
