# SPDX-FileCopyrightText: 2025 seedshard contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="seedshard",
    version="0.1.0",
    description="Split BIP39 seed phrases into Shamir shards encoded as mnemonics",
    author="seedshard contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click<9.0,>=8.1",
        "cryptography>=38.0.4",
        "mnemonic>=0.20",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "seedshard=seedshard.cli:main",
        ],
    },
)
