# Copyright (c) Meta Platforms, Inc. and affiliates
from setuptools import setup, find_packages

# Read the contents of README file
from pathlib import Path
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

dev_requires = [
    "pytest>=8.3.4",
    "pytest-cov>=2.0",
    "black>=22.0",
    "flake8>=3.9",
]

setup(
    name="DesignPatternCatalogue",
    version="0.1.0",
    description="Runnable demonstrations of classic object-oriented design patterns",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pyyaml>=6.0",
        "tabulate>=0.9.0",
        "colorama>=0.4.6",
    ],
    extras_require={
        "dev": dev_requires,
    }
)
