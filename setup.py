#!/usr/bin/env python3
# encoding: utf-8
"""
Package configuration for huby.
"""

from setuptools import setup, find_packages

REQUIREMENTS = [
    'click',
    'cloup',
    'humanfriendly',
    'loguru',
    'PyYAML',
    'tabulate',
]

TEST_REQUIREMENTS = [
    'pytest',
]


with open('huby/version.txt') as f:
    VERSION = f.read().strip()


setup(
    name='huby',
    version=VERSION,
    description='Parsing, formatting and arithmetic of human-readable byte sizes.',
    license='MIT',
    zip_safe=False,
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Environment :: Console",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries",
    ],
    python_requires='>=3.9',
    packages=find_packages(exclude=['tests*']),
    package_data={
        '': ['version.txt'],
    },
    entry_points={'console_scripts': [
        'huby = huby:main',
    ]},
    install_requires=REQUIREMENTS,
    extras_require={
        'test': TEST_REQUIREMENTS,
    },
)
