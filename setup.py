import codecs
import os
import re

from setuptools import find_packages
from setuptools import setup


def read_file(filename, encoding='utf8'):
    """Read unicode from given file."""
    with codecs.open(filename, encoding=encoding) as fd:
        return fd.read()


here = os.path.abspath(os.path.dirname(__file__))

# read version number (and other metadata) from package init
init_fn = os.path.join(here, 'src', 'lightsail_tools', '__init__.py')
meta = dict(re.findall(r"""__([a-z]+)__ = '([^']+)""", read_file(init_fn)))

readme = read_file(os.path.join(here, 'README.rst'))
version = meta['version']

# The aws command line tool is required at runtime but is not a Python
# dependency of this package; install it the way AWS documents.
install_requires = [
    'ConfigArgParse>=1.5.3',
]

test_extras = [
    'pytest',
    'pytest-cov',
]

setup(
    name='lightsail-tools',
    version=version,
    description="Attach certificates and DNS records to Lightsail container services",
    long_description=readme,
    license='Apache License 2.0',
    python_requires='>=3.9',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: Name Service (DNS)',
        'Topic :: Security',
        'Topic :: System :: Systems Administration',
        'Topic :: Utilities',
    ],

    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    include_package_data=True,

    install_requires=install_requires,
    extras_require={
        'test': test_extras,
    },

    entry_points={
        'console_scripts': [
            'lightsail-tools = lightsail_tools.main:main',
        ],
    },
)
