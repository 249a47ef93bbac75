#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="curvegeometry",
    version="0.1.0",
    description="Bezier curve algebra for 2D shapes - intercepts, projection and containment with NumPy",
    author="curvegeometry Team",
    packages=find_packages(include=["curvegeometry", "curvegeometry.*"]),
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "plot": ["matplotlib>=3.3"],
        "torch": ["torch>=1.10"],
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
)
