#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigWeaver v0.1.0

Configuration parser: YAML config loading, merging, and validation.

Author: ContigWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import copy
import os
import re
import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .. import ContigWeaverError
from .schema import DEFAULT_CONFIG, _deep_merge, validate_config


# ${VAR} or ${VAR:-default}
_ENV_PATTERN = re.compile(r'\$\{([^}:]+)(?::-(.*?))?\}')


def _expand_env(value: Any) -> Any:
    """Expand environment references in every string of a nested config."""
    if isinstance(value, dict):
        return {k: _expand_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand_env(v) for v in value]
    if isinstance(value, str):
        return _ENV_PATTERN.sub(
            lambda m: os.environ.get(m.group(1), m.group(2) or ''), value
        )
    return value


class ConfigValidationError(ContigWeaverError):
    """Raised when configuration validation fails."""
    pass


class ConfigParser:
    """
    Parse and validate ContigWeaver configuration files.

    Features:
    - Load YAML configuration files
    - Merge with default values
    - Environment variable substitution (${VAR} and ${VAR:-default})
    - CLI parameter overrides
    - Schema validation
    - Dotted notation access (e.g., config.get('metrics.kmer_size'))
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize configuration parser.

        Args:
            config_file: Path to YAML configuration file (optional)
        """
        self.config_file = Path(config_file) if config_file else None
        self._config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)

        # Load user configuration if provided
        if self.config_file:
            self._load_user_config()

    def _load_user_config(self):
        """Load and merge user configuration file."""
        if not self.config_file or not self.config_file.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_file}"
            )

        try:
            with open(self.config_file, 'r') as f:
                user_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(
                f"Invalid YAML in config file {self.config_file}: {e}"
            ) from e

        if user_config:
            if not isinstance(user_config, dict):
                raise ConfigValidationError(
                    f"Config file {self.config_file} must contain a mapping"
                )
            # User values override defaults
            self._config = _deep_merge(self._config, user_config)
            self._config = _expand_env(self._config)

    def merge_cli_overrides(self, overrides: Dict[str, Any]):
        """
        Apply command-line values on top of the loaded configuration.

        Args:
            overrides: Dotted keys (e.g. 'metrics.kmer_size') to values.
                       None means the option was not given and is skipped.
        """
        for key, value in overrides.items():
            if value is None:
                continue

            section_path, _, leaf = key.rpartition('.')
            target = self._config
            for part in filter(None, section_path.split('.')):
                target = target.setdefault(part, {})
                if not isinstance(target, dict):
                    # left for validate() to report
                    break
            else:
                target[leaf] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key such as 'output.logging.level'."""
        value: Any = self._config
        for part in key.split('.'):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def validate(self) -> bool:
        """
        Validate configuration against the schema.

        Returns:
            True if valid

        Raises:
            ConfigValidationError: If validation fails
        """
        errors = validate_config(self._config)
        if errors:
            raise ConfigValidationError("; ".join(errors))
        return True

    def __repr__(self) -> str:
        """String representation."""
        return f"ConfigParser(config_file={self.config_file})"

# ContigWeaver v0.1.0
# Any usage is subject to this software's license.
