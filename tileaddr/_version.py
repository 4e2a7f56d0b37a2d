from pathlib import Path

FallbackVersion = '0.0.0'


def get_version():
    """获取tileaddr版本号

    已安装时读取包元数据，源码目录下通过versioningit从git标签推导，均失败时返回FallbackVersion
    """
    from importlib.metadata import version, PackageNotFoundError

    try:
        return version('tileaddr')
    except PackageNotFoundError:
        pass

    error = ImportError
    try:
        from versioningit import get_version as get_vcs_version, NotVersioningitError, NotVCSError, NotSdistError
        error = ImportError, NotVersioningitError, NotVCSError, NotSdistError

        return get_vcs_version(Path(__file__).parent.parent)
    except error:
        return FallbackVersion


def parse_version_tuple(version: str):
    """将`1.2.3.post4+gabcdef`形式的版本号拆分为 (1, 2, 3, 'post4', 'gabcdef')
    """
    public, _, local = version.partition('+')
    parts = []
    for part in public.split('.'):
        parts.append(int(part) if part.isdigit() else part)
    if local:
        parts.append(local)

    return tuple(parts)
