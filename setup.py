# setup.py

from setuptools import setup, find_packages

setup(
    name="envelope_coverage",
    version="0.1.0",
    description="Sweep-line decision of whether sensor envelopes cover a distance/light region",
    packages=find_packages(exclude=["tests*", "benchmarks*", "examples*", "scripts*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
)
