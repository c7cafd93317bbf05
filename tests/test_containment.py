"""Tests for root containment checks"""

import os

import pytest

from src.infrastructure.filesystem import ContainmentChecker, is_contained


class TestIsContained:
    """Containment of resolved real paths"""

    def test_root_contains_itself(self, data_root):
        assert is_contained(data_root, data_root)
        assert is_contained(str(data_root), str(data_root))

    def test_children_contained(self, data_root):
        assert is_contained(data_root / "b.txt", data_root)
        assert is_contained(data_root / "reports" / "daily" / "report.html", data_root)

    def test_missing_children_contained(self, data_root):
        assert is_contained(data_root / "does-not-exist.log", data_root)

    def test_parent_not_contained(self, data_root):
        assert not is_contained(data_root.parent, data_root)
        assert not is_contained(data_root / ".." / "outside", data_root)

    def test_sibling_with_common_prefix_not_contained(self, tmp_path):
        root = tmp_path / "data"
        sibling = tmp_path / "data2"
        root.mkdir()
        sibling.mkdir()

        assert not is_contained(sibling, root)
        assert not is_contained(sibling / "file.txt", root)

    def test_symlink_escape_not_contained(self, data_root, outside_dir):
        link = data_root / "escape"
        os.symlink(outside_dir, link)

        assert not is_contained(link, data_root)
        assert not is_contained(link / "secret.txt", data_root)

    def test_symlink_inside_root_contained(self, data_root):
        link = data_root / "latest"
        os.symlink(data_root / "reports", link)

        assert is_contained(link, data_root)

    def test_symlinked_root(self, tmp_path, data_root):
        alias = tmp_path / "alias"
        os.symlink(data_root, alias)

        assert is_contained(alias / "b.txt", data_root)
        assert is_contained(data_root / "b.txt", alias)

    def test_unresolvable_input_not_contained(self, data_root):
        assert not is_contained("/tmp/bad\0path", data_root)


class TestIsPathSafe:
    """Combined sanitize, map and containment check"""

    @pytest.mark.parametrize("virtual", ["/", "/reports", "reports/daily", "/missing.log"])
    def test_safe_paths(self, data_root, virtual):
        assert ContainmentChecker.is_path_safe(virtual, data_root)

    @pytest.mark.parametrize("virtual", ["../etc/passwd", "", "/a\0b", "/CON"])
    def test_unsafe_paths(self, data_root, virtual):
        assert not ContainmentChecker.is_path_safe(virtual, data_root)

    def test_clamped_traversal_stays_inside(self, data_root):
        assert ContainmentChecker.is_path_safe("/reports/../../../etc/passwd", data_root)

    def test_symlink_escape_unsafe(self, data_root, outside_dir):
        os.symlink(outside_dir, data_root / "escape")

        assert not ContainmentChecker.is_path_safe("/escape/secret.txt", data_root)
