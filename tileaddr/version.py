from typing import NamedTuple

from ._version import get_version, parse_version_tuple

__version__ = get_version()
version_tuple = parse_version_tuple(__version__)
full_version = __version__
base_version = NamedTuple('ShortVersion', major=int, minor=int, patch=int)(*(tuple(version_tuple[:3]) + (0, 0, 0))[:3])
short_version = '.'.join((str(i) for i in base_version))
is_release = len(version_tuple) == 3

del get_version, parse_version_tuple
