# Python version 3.8 and up.
from setuptools import setup, find_packages
from codecs import open
from os import path
import sys


here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

install_reqs = []
if sys.platform == "win32":
    install_reqs += ["winregistry>=1.1,<2"]

setup(
    version='1.0.0',
    name='winudid',
    description='Stable machine identifier for Windows built from hardware serials',
    keywords=('machine id, device id, udid, hardware id, wmic, wmi, MachineGuid, windows, python'),
    long_description_content_type="text/markdown",
    long_description=long_description,
    author='Matthew Roberts',
    author_email='matthew@roberts.pm',
    license='public domain',
    package_dir={"": "."},
    packages=find_packages(exclude=('tests', 'docs')),
    include_package_data=True,
    install_requires=install_reqs,
    entry_points={
        "console_scripts": ["winudid=winudid.__main__:cli"],
    },
    classifiers=[
        'Intended Audience :: Developers',
        'Operating System :: Microsoft :: Windows',
        'Programming Language :: Python :: 3'
    ],
)
