"""merkleproof setup - Merkle roots and inclusion proofs."""
from setuptools import setup, find_packages

setup(
    name="merkleproof",
    version="1.0.0",
    description="merkleproof: Merkle hash trees and inclusion proofs",
    packages=find_packages(include=["merkleproof", "merkleproof.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
        "blake3>=0.3",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "merkleproof=merkleproof.cli.main:cli",
        ],
    },
)
