#!/usr/bin/env python3
"""
HTTP Cache Stream Setup Script
==============================
Allows installation of the http-cache-stream package.

Usage:
    pip install -e .           # Development install
    pip install -e .[test]     # With test dependencies
    pip install .              # Regular install
"""

from setuptools import setup, find_packages

setup(
    name="http-cache-stream",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "http-cache-stream-config=http_cache_stream.cli:main",
        ],
    },
)
