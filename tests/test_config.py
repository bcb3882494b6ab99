import pytest

from morton3d import config


def test_size_class():
    assert config.COORD_BITS * 3 <= config.CODE_BITS
    assert config.COORD_MASK == 0x1FFFFF
    assert config.CODE_MASK == 0xFFFFFFFFFFFFFFFF


@pytest.mark.parametrize("value, expected", [
    ("1", True),
    ("true", True),
    ("yes", True),
    ("0", False),
    ("false", False),
    ("OFF", False),
    (" no ", False),
])
def test_read_flag(monkeypatch, value, expected):
    monkeypatch.setenv("MORTON3D_TEST_FLAG", value)
    assert config.read_flag("MORTON3D_TEST_FLAG", not expected) is expected


def test_read_flag_default(monkeypatch):
    monkeypatch.delenv("MORTON3D_TEST_FLAG", raising=False)
    assert config.read_flag("MORTON3D_TEST_FLAG", True) is True
    monkeypatch.setenv("MORTON3D_TEST_FLAG", "")
    assert config.read_flag("MORTON3D_TEST_FLAG", False) is False
