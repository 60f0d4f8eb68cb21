from setuptools import setup
from setuptools.errors import CCompilerError, ExecError, PlatformError
from Cython.Build import cythonize
from Cython.Distutils import build_ext

class optional_build_ext(build_ext):
    """ divide.py works uncompiled, so a missing C toolchain is not fatal """
    def run(self):
        try:
            build_ext.run(self)
        except PlatformError as e:
            self.warn("skipping the compiled divide module: {}".format(e))

    def build_extension(self, ext):
        try:
            build_ext.build_extension(self, ext)
        except (CCompilerError, ExecError, PlatformError) as e:
            self.warn("skipping the compiled {} module: {}".format(ext.name, e))

setup(
    name = "reflow",
    version = "0.1.0",
    description = "Optimal (minimum raggedness) line breaking for plain text",
    py_modules = ["divide", "reflow"],
    python_requires = ">=3.8",
    cmdclass = {'build_ext': optional_build_ext},
    ext_modules = cythonize(["divide.py"],
        compiler_directives = { 'language_level': 3, 'annotation_typing': False }),
    entry_points = { 'console_scripts': [ 'reflow = reflow:main' ] },
    extras_require = { 'test': [ 'pytest' ] },
)
