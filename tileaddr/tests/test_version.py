import tileaddr
from tileaddr import version
from tileaddr._version import parse_version_tuple


def test_version_available():
    assert isinstance(tileaddr.__version__, str)
    assert version.short_version.count('.') == 2


def test_parse_version_tuple():
    assert parse_version_tuple('1.2.3') == (1, 2, 3)
    assert parse_version_tuple('0.1.0.post4+gabcdef') == (0, 1, 0, 'post4', 'gabcdef')
