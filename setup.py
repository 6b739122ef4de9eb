"""
DYMO Badge Printer - Setup Script
=================================

Install: pip install .
Install dev: pip install -e ".[dev]"
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

with open("requirements.txt", "r", encoding="utf-8") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="dymo-badge-printer",
    version="1.0.0",
    author="EGS Software AG",
    author_email="marc@egs.ch",
    description="Batch name-badge printing through the local DYMO Label Web Service",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: Other/Proprietary License",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Printing",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "simulator": ["cryptography>=41"],
        "dev": ["pytest", "pytest-cov", "responses>=0.23", "black", "flake8"],
    },
    entry_points={
        "console_scripts": [
            "dymo-badges=dymo_badge_printer.cli:main",
        ],
    },
)
