# SPDX-FileCopyrightText: 2025 ORDeC contributors
# SPDX-License-Identifier: Apache-2.0

from setuptools import setup, find_packages

setup(
    name='bigrational',
    version='0.1.0',
    description='Exact rational numbers with correctly rounded float and decimal conversion',
    license='Apache-2.0',
    python_requires='>=3.9',
    packages=find_packages(include=['bigrational', 'bigrational.*']),
    install_requires=[
        'public',
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
