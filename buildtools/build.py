import os

import nox

PYTHONS = ['3.9', '3.12']


def find_wheel():
    path = './dist'

    if not os.path.exists(path):
        return None

    for file in os.listdir(path):
        if file.endswith('.whl'):
            return os.path.join(path, file)
    else:
        return None


@nox.session(python=PYTHONS)
def build_wheel(session: nox.Session) -> None:
    session.chdir('..')
    session.install('build')
    session.run('python', '-m', 'build', '--wheel')


@nox.session(python=PYTHONS)
def test(session: nox.Session) -> None:
    session.chdir('..')

    wheel = find_wheel()

    if wheel is not None:
        # 针对打包结果进行测试
        session.install(wheel + '[test]')
        session.chdir('dist')
        session.run('pytest', '--pyargs', 'tileaddr')
    else:
        session.install('-e', '.[test]')
        session.run('pytest', 'tileaddr')
