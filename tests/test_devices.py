import pytest

from xdogflow.devices import cores_per_multiprocessor, format_version


@pytest.mark.parametrize(
    "major, minor, cores",
    [(1, 0, 8), (1, 1, 8), (1, 2, 8), (1, 3, 8), (2, 0, 32), (2, 1, 48)],
)
def test_known_capabilities(major, minor, cores):
    assert cores_per_multiprocessor(major, minor) == cores


@pytest.mark.parametrize("major, minor", [(3, 0), (1, 4), (0, 0), (9999, 9999)])
def test_unknown_capability(major, minor):
    assert cores_per_multiprocessor(major, minor) is None


def test_minimum_required_version():
    assert format_version(4000) == "4.0"


@pytest.mark.parametrize("version", [0, 1000, 3000, 4000, 5050, 11000])
def test_major_part_is_thousands(version):
    major, minor = format_version(version).split(".")
    assert int(major) == version // 1000
    assert int(minor) == version % 100


def test_negative_version_rejected():
    with pytest.raises(ValueError):
        format_version(-1)