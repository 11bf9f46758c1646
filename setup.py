#!/usr/bin/env python3
"""
Package setup for FRM Workbench.

Install with `pip install -e .` (add `[test]` for the test suite).
"""

from setuptools import setup, find_packages

setup(
    name="frm-workbench",
    version="0.1.0",
    description="BMW FRM D-Flash analysis and EEPROM rebuild tool",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.5.0",
        "rich>=13.7.0",
        "numpy>=1.26.0",
        "textual>=0.86.0",
    ],
    extras_require={
        "test": ["pytest>=7.4.0"],
    },
    entry_points={
        "console_scripts": [
            "frm-workbench=frm_restore.main:main",
        ],
    },
)
