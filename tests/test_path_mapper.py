"""Tests for virtual/real path mapping"""

import pytest

from src.infrastructure.filesystem import (InvalidPathError, PathMapper,
                                           real_to_virtual, virtual_to_real)


class TestToReal:
    """Virtual to real path mapping"""

    def test_root(self):
        assert virtual_to_real("/", "/tmp/test-data") == "/tmp/test-data"

    def test_nested_paths(self):
        assert virtual_to_real("/reports", "/tmp/test-data") == "/tmp/test-data/reports"
        assert virtual_to_real("/reports/daily/test.log", "/tmp/test-data") == \
            "/tmp/test-data/reports/daily/test.log"

    def test_input_is_sanitized_first(self):
        mapper = PathMapper("/data")
        assert mapper.to_real("a//b.log/") == "/data/a/b.log"
        assert mapper.to_real("/x/../../../etc/passwd") == "/data/etc/passwd"

    def test_root_trailing_slash_ignored(self):
        assert PathMapper("/data/").to_real("/a") == "/data/a"

    def test_invalid_input_raises(self):
        with pytest.raises(InvalidPathError):
            PathMapper("/data").to_real("../etc/passwd")


class TestToVirtual:
    """Real to virtual path mapping"""

    def test_root(self):
        assert real_to_virtual("/tmp/test-data", "/tmp/test-data") == "/"

    def test_nested_paths(self):
        assert real_to_virtual("/tmp/test-data/reports", "/tmp/test-data") == "/reports"
        assert real_to_virtual("/tmp/test-data/reports/daily/test.log", "/tmp/test-data") == \
            "/reports/daily/test.log"

    @pytest.mark.parametrize("virtual", ["/", "/reports", "/reports/daily/test.log", "/a b/c"])
    def test_inverse_of_to_real(self, virtual):
        mapper = PathMapper("/srv/data")
        assert mapper.to_virtual(mapper.to_real(virtual)) == virtual

    @pytest.mark.parametrize("real", ["/etc/passwd", "/srv", "/srv/data2/file"])
    def test_outside_root_rejected(self, real):
        with pytest.raises(InvalidPathError, match="outside the configured root"):
            PathMapper("/srv/data").to_virtual(real)
