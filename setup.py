import os
from setuptools import setup, find_packages

main_ns = {}
ver_path = os.path.join('lazyreach', 'properties.py')
with open(ver_path) as ver_file:
    exec(ver_file.read(), main_ns)

setup(name='lazyreach',
      version=main_ns['__version__'],
      install_requires=['torch','numpy','scipy'],
      packages=find_packages(include=['lazyreach', 'lazyreach.*']),
      package_dir={"": "."}
)
