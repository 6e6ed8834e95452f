#!/usr/bin/env python3
"""
Setup file for parquet-browser
"""

from setuptools import setup, find_packages

setup(
    name="parquet-browser",
    version="0.1.0",
    description="Inspect the row groups, column chunks and pages of Parquet files",
    author="",
    author_email="",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "thrift",
        "pyarrow",
    ],
    extras_require={
        "dev": [
            "pytest",
            "coverage",
            "pandas",
        ],
    },
    entry_points={
        "console_scripts": [
            "parquet-browser=parquet_browser.cli:main",
        ],
    },
)
