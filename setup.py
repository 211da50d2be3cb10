import sys

import setuptools

__version__ = '0.1.0'
__title__ = 'fluentfp'
__description__ = 'Optional and Result wrapper types with a fluent, asyncio aware API'
__url__ = 'https://github.com/fluentfp/fluentfp'

if sys.version_info < (3, 11):
    raise RuntimeError(f'{__title__}:{__version__} requires Python 3.11 or greater')

setuptools.setup(
    name=__title__,
    version=__version__,
    description=__description__,
    url=__url__,
    python_requires='>=3.11',
    packages=setuptools.find_packages(include=('fluentfp', 'fluentfp.*')),
    install_requires=[
        'loguru',
        'typing-extensions',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-asyncio',
            'pytest-mock',
        ],
    },
    package_data={
        'fluentfp': ['py.typed'],
    },
    zip_safe=False,  # https://mypy.readthedocs.io/en/latest/installed_packages.html
)
