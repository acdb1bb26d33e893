# SPDX-FileCopyrightText: 2025 ratlib contributors
# SPDX-License-Identifier: Apache-2.0

from setuptools import setup, find_packages

setup(
    name='ratlib',
    version='0.1.0',
    description='Exact rational numbers with mixed-number text input and output',
    license='Apache-2.0',
    python_requires='>=3.10',
    packages=find_packages(include=['ratlib', 'ratlib.*']),
    install_requires=[
        'atpublic',
        'numpy',
    ],
    extras_require={
        'test': [
            'pytest',
            'hypothesis',
        ],
        'docs': [
            'sphinx',
            'sphinx_rtd_theme',
        ],
    },
    entry_points={
        'console_scripts': [
            'ratlib-calc = ratlib.calc:main',
        ],
    },
)
