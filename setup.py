"""Package setup."""

from pathlib import Path

from setuptools import setup, find_packages

import version

long_description = (Path(__file__).parent / 'README.md').read_text()

setup(
    name='openinghours',
    version=version.get_version(),
    description="Clock-times and time ranges for opening hours.",
    long_description=long_description,
    long_description_content_type="text/markdown",

    keywords=(
        'opening-hours',
        'time-range',
    ),
    license='MIT',

    zip_safe=False,

    packages=find_packages(),
    package_data={
        'openinghours.config': ['schema.yaml'],
    },

    classifiers=(
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Natural Language :: English',
        'Operating System :: POSIX',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ),

    install_requires=(
        'click',
        'layer-loader',
        'pyyaml >= 5',
        'jsonschema >=3',
        'python-dateutil',
    ),

    extras_require={
        'test': (
            'pytest',
            'freezegun',
            'pytest-cov',
        ),
    },

    entry_points={
        'console_scripts': (
            'openinghours = openinghours.cli:main',
        ),
    },
)
