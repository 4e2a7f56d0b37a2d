from setuptools import setup
from setuptools.command.sdist import sdist
from versioningit import get_cmdclasses


class CleanSdistCommand(sdist):
    def make_distribution(self):
        """打包sdist时排除测试过程中产生的缓存文件
        """
        files = self.filelist.files
        for i in range(len(files) - 1, -1, -1):
            if '__pycache__' in files[i] or '.pytest_cache' in files[i]:
                print(f"removing cache file '{files[i]}'")
                del files[i]

        super(CleanSdistCommand, self).make_distribution()


setup(
    cmdclass=get_cmdclasses({'sdist': CleanSdistCommand}),
)
