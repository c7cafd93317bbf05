"""Tests for the directory store"""

import os

import pytest

from src.infrastructure.filesystem import (DirectoryStore, FileType,
                                           InvalidPathError, NotFoundError)


class TestInitialize:
    """Root availability checks"""

    @pytest.mark.asyncio
    async def test_existing_root(self, store):
        await store.initialize()
        assert store.initialized

        # Idempotent
        await store.initialize()
        assert store.initialized

    @pytest.mark.asyncio
    async def test_missing_root(self, tmp_path):
        store = DirectoryStore(tmp_path / "missing")

        with pytest.raises(NotFoundError):
            await store.initialize()
        assert not store.initialized

    @pytest.mark.asyncio
    async def test_root_is_a_file(self, tmp_path):
        root = tmp_path / "file"
        root.write_text("not a directory")

        with pytest.raises(NotFoundError):
            await DirectoryStore(root).initialize()


class TestList:
    """Directory listings"""

    @pytest.mark.asyncio
    async def test_directories_first_then_names(self, store):
        entries = await store.list("/")

        assert [e.name for e in entries] == [
            "a", "reports", "test folder", "b.txt", "c.txt", "README.md"
        ]

    @pytest.mark.asyncio
    async def test_entry_metadata(self, store):
        entries = {e.name: e for e in await store.list("/")}

        folder = entries["a"]
        assert folder.path == "/a"
        assert folder.is_directory
        assert folder.size is None
        assert folder.type == FileType.FOLDER
        assert folder.last_modified_iso == "2024-01-17T10:00:00.000Z"

        text = entries["b.txt"]
        assert text.path == "/b.txt"
        assert not text.is_directory
        assert text.size == 3
        assert text.type == FileType.TEXT
        assert text.last_modified_iso == "2024-01-17T10:00:00.000Z"

        assert entries["README.md"].type == FileType.MARKDOWN

    @pytest.mark.asyncio
    async def test_accented_names_sort_with_base_letter(self, tmp_path):
        for name in ["zeta.txt", "éclair.txt", "fig.txt"]:
            (tmp_path / name).write_text("x")

        entries = await DirectoryStore(tmp_path).list("/")

        assert [e.name for e in entries] == ["éclair.txt", "fig.txt", "zeta.txt"]

    @pytest.mark.asyncio
    async def test_case_insensitive_order(self, tmp_path):
        for name in ["beta.log", "Alpha.log", "Écho.log"]:
            (tmp_path / name).write_text("x")

        entries = await DirectoryStore(tmp_path).list("/")

        assert [e.name for e in entries] == ["Alpha.log", "beta.log", "Écho.log"]

    @pytest.mark.asyncio
    async def test_to_dict(self, store):
        entries = {e.name: e for e in await store.list("/")}

        assert entries["c.txt"].to_dict() == {
            "name": "c.txt",
            "path": "/c.txt",
            "isDirectory": False,
            "size": 3,
            "lastModified": "2024-01-17T10:00:00.000Z",
            "type": "text",
        }

    @pytest.mark.asyncio
    async def test_nested_directory(self, store):
        entries = await store.list("/reports/daily")

        assert len(entries) == 1
        assert entries[0].name == "report.html"
        assert entries[0].path == "/reports/daily/report.html"
        assert entries[0].type == FileType.HTML

    @pytest.mark.asyncio
    async def test_unsanitized_input(self, store):
        entries = await store.list("reports//")

        assert [e.path for e in entries] == ["/reports/daily"]

    @pytest.mark.asyncio
    async def test_default_is_root(self, store):
        assert await store.list() == await store.list("/")

    @pytest.mark.asyncio
    async def test_empty_directory(self, store):
        assert await store.list("/test folder") == []

    @pytest.mark.asyncio
    async def test_missing_directory(self, store):
        with pytest.raises(NotFoundError) as exc_info:
            await store.list("/non-existent")

        assert exc_info.value.path == "/non-existent"

    @pytest.mark.asyncio
    async def test_file_is_not_listable(self, store):
        with pytest.raises(NotFoundError):
            await store.list("/b.txt")

    @pytest.mark.asyncio
    async def test_traversal_rejected(self, store):
        with pytest.raises(InvalidPathError):
            await store.list("../etc")

    @pytest.mark.asyncio
    async def test_clamped_traversal_stays_in_root(self, store):
        with pytest.raises(NotFoundError) as exc_info:
            await store.list("/reports/../../../etc")

        assert exc_info.value.path == "/etc"

    @pytest.mark.asyncio
    async def test_escaping_symlink_skipped(self, store, data_root, outside_dir):
        os.symlink(outside_dir, data_root / "escape")

        names = [e.name for e in await store.list("/")]
        assert "escape" not in names

    @pytest.mark.asyncio
    async def test_broken_symlink_skipped(self, store, data_root):
        os.symlink(data_root / "missing-target", data_root / "dangling")

        names = [e.name for e in await store.list("/")]
        assert "dangling" not in names
        assert "b.txt" in names

    @pytest.mark.asyncio
    async def test_listing_through_escaping_symlink(self, store, data_root, outside_dir):
        os.symlink(outside_dir, data_root / "escape")

        with pytest.raises(NotFoundError):
            await store.list("/escape")


class TestReadFile:
    """File content reads"""

    @pytest.mark.asyncio
    async def test_read(self, store):
        assert await store.read_file("/a/b.log") == b"line 1\nline 2\n"

    @pytest.mark.asyncio
    async def test_read_binary_content_unchanged(self, store, data_root):
        payload = bytes(range(256))
        (data_root / "blob.bin").write_bytes(payload)

        assert await store.read_file("/blob.bin") == payload

    @pytest.mark.asyncio
    async def test_read_missing(self, store):
        with pytest.raises(NotFoundError):
            await store.read_file("/missing.log")

    @pytest.mark.asyncio
    async def test_read_directory(self, store):
        with pytest.raises(NotFoundError, match="directory"):
            await store.read_file("/reports")

    @pytest.mark.asyncio
    async def test_read_invalid(self, store):
        with pytest.raises(InvalidPathError):
            await store.read_file("../../etc/passwd")

    @pytest.mark.asyncio
    async def test_read_through_escaping_symlink(self, store, data_root, outside_dir):
        os.symlink(outside_dir / "secret.txt", data_root / "secret.txt")

        with pytest.raises(NotFoundError):
            await store.read_file("/secret.txt")

    @pytest.mark.asyncio
    async def test_stream(self, store, data_root):
        (data_root / "big.log").write_bytes(b"x" * 10)

        chunks = [chunk async for chunk in store.read_file_stream("/big.log", chunk_size=4)]

        assert chunks == [b"xxxx", b"xxxx", b"xx"]

    @pytest.mark.asyncio
    async def test_stream_missing(self, store):
        with pytest.raises(NotFoundError):
            async for _ in store.read_file_stream("/missing.log"):
                pass


class TestStat:
    """Single entry metadata"""

    @pytest.mark.asyncio
    async def test_stat_file(self, store):
        entry = await store.stat("/a/b.log")

        assert entry.name == "b.log"
        assert entry.path == "/a/b.log"
        assert entry.size == len(b"line 1\nline 2\n")
        assert entry.type == FileType.LOG

    @pytest.mark.asyncio
    async def test_stat_directory(self, store):
        entry = await store.stat("/reports/daily/")

        assert entry.name == "daily"
        assert entry.path == "/reports/daily"
        assert entry.is_directory
        assert entry.size is None

    @pytest.mark.asyncio
    async def test_stat_root(self, store):
        entry = await store.stat("/")

        assert entry.name == "/"
        assert entry.path == "/"
        assert entry.type == FileType.FOLDER

    @pytest.mark.asyncio
    async def test_stat_missing(self, store):
        with pytest.raises(NotFoundError):
            await store.stat("/nope")


class TestClassify:

    def test_delegates_to_extension_table(self):
        assert DirectoryStore.classify("x.yml", False) == FileType.YAML
        assert DirectoryStore.classify("x.yml", True) == FileType.FOLDER

    def test_null_name(self):
        with pytest.raises(TypeError):
            DirectoryStore.classify(None, False)
