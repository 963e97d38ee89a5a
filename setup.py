from __future__ import annotations

from setuptools import find_packages, setup


setup(
    name="sitepercol",
    version="0.1.0",
    description="Site percolation on square grids and Monte Carlo threshold estimation",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20",
        "joblib>=1.0",
        "click>=8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "sitepercol=sitepercol.cli:cli",
        ],
    },
)
