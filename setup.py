# SPDX-FileCopyrightText: 2025 Secret Finder contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="secret-finder",
    version="0.1.0",
    description="Threshold secret reconstruction by exact Lagrange interpolation",
    author="Secret Finder contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click<9.0,>=8.1",
        "PyYAML<7.0,>=6.0",
    ],
    extras_require={
        # dev / testing
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=5.0.0",
            "pytest-timeout>=2.3.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "secret-finder=secret_finder.cli:main",
        ],
    },
)
