"""FHEVM example scaffolder -- generates standalone example projects.

Copies the shared Hardhat template, adds the example's contract and test, and
writes the derived deploy script, ``package.json`` and README.

Quick usage::

    from fhevm_examples.scaffolder import ExampleGenerator

    generator = ExampleGenerator()
    project_path = generator.create("fhe-counter", "/tmp/fhe-counter")
"""

from fhevm_examples.scaffolder.config_gen import ConfigSynthesizer
from fhevm_examples.scaffolder.generator import ExampleGenerator
from fhevm_examples.scaffolder.templates import TemplateRenderer

__all__ = [
    "ConfigSynthesizer",
    "ExampleGenerator",
    "TemplateRenderer",
]
