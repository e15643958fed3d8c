"""
Environment Config Provider - Load configuration from environment variables.

Supports, in increasing priority:
- .env files
- Environment variables (SOLID_STRICT, SOLID_VERBOSE, SOLID_PRECISION)
- Command line argument overrides
"""

import os
from pathlib import Path
from typing import Any, Optional

from ...core.exceptions import ConfigurationError
from ...core.ports.config_provider import AppConfig, ConfigProviderPort


def _coerce(raw_value: str) -> Any:
    """Convert boolean-ish strings to bool, leave everything else alone."""
    if raw_value.lower() in ("true", "1", "yes"):
        return True
    if raw_value.lower() in ("false", "0", "no"):
        return False
    return raw_value


class EnvironmentConfigProvider(ConfigProviderPort):
    """
    Configuration provider that loads from environment variables and .env files.
    """
    
    ENV_MAPPING = {
        "SOLID_STRICT": "strict_dimensions",
        "SOLID_VERBOSE": "verbose",
        "SOLID_PRECISION": "precision",
    }
    
    BOOLEAN_KEYS = frozenset({"strict_dimensions", "verbose"})
    
    CLI_MAPPING = {
        "strict": "strict_dimensions",
        "verbose": "verbose",
        "precision": "precision",
    }
    
    def __init__(
        self,
        env_file: Optional[Path] = None,
        cli_overrides: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize the config provider.
        
        Args:
            env_file: Path to .env file (./.env is used if not specified)
            cli_overrides: Command line argument overrides
        """
        self._values: dict[str, Any] = {}
        self._env_file = env_file
        self._cli_overrides = cli_overrides or {}
        
        self._load_env_file()
        self._load_environment()
        self._apply_cli_overrides()
    
    # -------------------------------------------------------------------------
    # ConfigProviderPort Implementation
    # -------------------------------------------------------------------------
    
    @property
    def name(self) -> str:
        return "Environment"
    
    def load(self) -> AppConfig:
        """
        Load complete configuration.
        
        Raises:
            ConfigurationError: If validate() reports any problem
        """
        errors = self.validate()
        if errors:
            raise ConfigurationError(errors)
        
        return AppConfig(
            strict_dimensions=bool(self.get("strict_dimensions", False)),
            verbose=bool(self.get("verbose", False)),
            precision=int(self.get("precision", 4)),
        )
    
    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        key = key.lower().replace("-", "_")
        return self._values.get(key, default)
    
    def set(self, key: str, value: Any) -> None:
        """Set a configuration value."""
        key = key.lower().replace("-", "_")
        self._values[key] = value
    
    def validate(self) -> list[str]:
        """Validate configuration."""
        errors = []
        
        precision = self.get("precision", 4)
        if isinstance(precision, bool):
            errors.append(f"SOLID_PRECISION must be an integer, got {precision!r}")
        else:
            try:
                if int(precision) < 0:
                    errors.append(f"SOLID_PRECISION must be >= 0, got {precision}")
            except (TypeError, ValueError):
                errors.append(f"SOLID_PRECISION must be an integer, got {precision!r}")
        
        for key in sorted(self.BOOLEAN_KEYS):
            value = self.get(key, False)
            if not isinstance(value, bool):
                errors.append(f"{key} must be true/false, got {value!r}")
        
        return errors
    
    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------
    
    def _load_env_file(self) -> None:
        """Load values from .env file."""
        env_file = self._find_env_file()
        if not env_file:
            return
        
        for line in env_file.read_text().splitlines():
            line = line.strip()
            
            # Skip empty lines and comments
            if not line or line.startswith("#"):
                continue
            
            if "=" not in line:
                continue
            
            key, value = line.split("=", 1)
            key = key.strip().upper()
            value = value.strip().strip('"').strip("'")
            
            config_key = self.ENV_MAPPING.get(key)
            if config_key:
                self._values[config_key] = self._convert(config_key, value)
    
    def _convert(self, config_key: str, raw_value: str) -> Any:
        """Coerce raw strings for boolean keys; other keys stay strings."""
        if config_key in self.BOOLEAN_KEYS:
            return _coerce(raw_value)
        return raw_value
    
    def _find_env_file(self) -> Optional[Path]:
        """Find .env file."""
        if self._env_file is not None:
            return self._env_file if self._env_file.exists() else None
        
        cwd_env = Path.cwd() / ".env"
        if cwd_env.exists():
            return cwd_env
        
        return None
    
    def _load_environment(self) -> None:
        """Load values from environment variables."""
        for env_key, config_key in self.ENV_MAPPING.items():
            raw_value = os.environ.get(env_key)
            if raw_value is not None:
                self._values[config_key] = self._convert(config_key, raw_value)
    
    def _apply_cli_overrides(self) -> None:
        """Apply CLI argument overrides."""
        for cli_key, config_key in self.CLI_MAPPING.items():
            if cli_key in self._cli_overrides and self._cli_overrides[cli_key] is not None:
                self._values[config_key] = self._cli_overrides[cli_key]
