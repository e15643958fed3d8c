"""
Adapters - Concrete implementations of the core ports.
"""

from .config import EnvironmentConfigProvider

__all__ = ["EnvironmentConfigProvider"]
