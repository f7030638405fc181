#!/usr/bin/env python3
"""
catdomain: Categorical Domains

Setup script for installation.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="catdomain",
    version="1.0.0",
    author="Juan Zambrano, Enrique ter Horst, Sridhar Mahadevan",
    author_email="jd.yokim@gmail.com",
    description="Dense integer indexing of categorical values with counting and vocabulary trimming",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/example/catdomain",
    packages=find_packages(include=["catdomain", "catdomain.*"]),
    py_modules=["main"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
    ],
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "scipy>=1.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "catdomain=main:main",
        ],
    },
)
