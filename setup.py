"""
Setup for flightfilter.
This makes 'flightfilter' an installable Python package.
"""
from setuptools import setup, find_packages

setup(
    name="flightfilter",
    version="1.0.0",
    packages=find_packages(include=["flightfilter", "flightfilter.*"]),
    install_requires=[
        line.strip()
        for line in open('flightfilter/requirements.txt')
        if line.strip() and not line.startswith('#')
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "flightfilter=flightfilter.main:main",
        ],
    },
    python_requires=">=3.9",
)
