"""
Setup script for the bitcoin-tx-battle package.

Installs the ``tx_battle`` package from src/ with its runtime
dependencies. Test tooling is in the ``dev`` extra.
"""

from setuptools import setup, find_packages

setup(
    name="bitcoin-tx-battle",
    version="1.0.0",
    description="Bitcoin TX Battle - predict the next Bitcoin block and score against the chain",
    author="The Bitcoin TX Battle authors",
    license="MIT",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
        "requests>=2.31.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4",
            "build",
            "wheel",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
