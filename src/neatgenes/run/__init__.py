"""
NEAT Run Package

This package handles the run-time configuration of the gene layer: the
trait specification tables that drive trait initialization and mutation.

Modules:
    config: Configuration loaded from INI files

Exported Classes:
    Config: Trait specification tables for connection and node genes
"""

from neatgenes.run.config import Config

__all__ = ['Config']
