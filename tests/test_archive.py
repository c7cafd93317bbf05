"""Tests for directory archives"""

import io
import os
import zipfile

import pytest

from src.infrastructure.filesystem import NotFoundError
from src.infrastructure.filesystem.archive import archive_name, build_archive


def _open(archive) -> zipfile.ZipFile:
    return zipfile.ZipFile(io.BytesIO(archive.read()))


class TestArchiveName:

    def test_names(self):
        assert archive_name("/reports/daily") == "daily.zip"
        assert archive_name("/reports") == "reports.zip"
        assert archive_name("/") == "root.zip"


class TestBuildArchive:
    """ZIP creation through the store"""

    @pytest.mark.asyncio
    async def test_directory(self, store):
        filename, archive = await build_archive(store, "/reports")

        try:
            assert filename == "reports.zip"
            with _open(archive) as zf:
                assert zf.namelist() == ["reports/daily/report.html"]
                assert zf.read("reports/daily/report.html") == b"<html></html>"
        finally:
            archive.close()

    @pytest.mark.asyncio
    async def test_root(self, store):
        filename, archive = await build_archive(store, "/")

        try:
            assert filename == "root.zip"
            with _open(archive) as zf:
                names = set(zf.namelist())
        finally:
            archive.close()

        assert names == {
            "root/a/b.log",
            "root/reports/daily/report.html",
            "root/test folder/",
            "root/b.txt",
            "root/c.txt",
            "root/README.md",
        }

    @pytest.mark.asyncio
    async def test_small_chunks(self, store, data_root):
        (data_root / "a" / "large.log").write_bytes(b"0123456789" * 100)

        _, archive = await build_archive(store, "/a", chunk_size=7)

        try:
            with _open(archive) as zf:
                assert zf.read("a/large.log") == b"0123456789" * 100
        finally:
            archive.close()

    @pytest.mark.asyncio
    async def test_file_rejected(self, store):
        with pytest.raises(NotFoundError):
            await build_archive(store, "/b.txt")

    @pytest.mark.asyncio
    async def test_missing_rejected(self, store):
        with pytest.raises(NotFoundError):
            await build_archive(store, "/missing")

    @pytest.mark.asyncio
    async def test_symlink_back_to_ancestor_walked_once(self, store, data_root):
        os.symlink(data_root / "reports", data_root / "reports" / "daily" / "loop")

        _, archive = await build_archive(store, "/reports")

        try:
            with _open(archive) as zf:
                assert zf.namelist() == ["reports/daily/report.html"]
        finally:
            archive.close()

    @pytest.mark.asyncio
    async def test_multiple_cycles_terminate(self, store, data_root):
        os.symlink(data_root, data_root / "a" / "up")
        os.symlink(data_root, data_root / "reports" / "back")

        _, archive = await build_archive(store, "/")

        try:
            with _open(archive) as zf:
                names = zf.namelist()
        finally:
            archive.close()

        assert sorted(names) == [
            "root/README.md",
            "root/a/b.log",
            "root/b.txt",
            "root/c.txt",
            "root/reports/daily/report.html",
            "root/test folder/",
        ]
