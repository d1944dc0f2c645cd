"""FHEVM example kit.

Scaffolds standalone Hardhat projects for the FHEVM example catalog and
generates their GitBook documentation.
"""

__version__ = "0.1.0"
