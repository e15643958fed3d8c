"""
Config Provider Port - Abstract interface for configuration sources.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class AppConfig:
    """Complete application configuration."""
    
    strict_dimensions: bool = False  # reject negative/non-finite dimensions
    verbose: bool = False
    precision: int = 4  # digits after the decimal point in CLI output


class ConfigProviderPort(ABC):
    """
    Abstract interface for configuration providers.
    
    Implementations load configuration from a concrete source
    (environment, files, command line) and expose it as an AppConfig.
    """
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Get the provider name."""
        ...
    
    @abstractmethod
    def load(self) -> AppConfig:
        """Load complete configuration."""
        ...
    
    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a single configuration value."""
        ...
    
    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Set a single configuration value."""
        ...
    
    @abstractmethod
    def validate(self) -> list[str]:
        """
        Validate configuration.
        
        Returns:
            List of validation errors (empty if valid)
        """
        ...
