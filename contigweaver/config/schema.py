"""
ContigWeaver v0.1.0

Configuration schema for ContigWeaver.

Defines all available configuration parameters with defaults and validation.

Author: ContigWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import copy
from typing import Dict, Any, Optional, List
from pathlib import Path
import yaml


VALID_OUTPUT_FORMATS = ['csv', 'json']
VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # Input
    # ========================================================================
    'input': {
        'min_length': 0,  # Skip contigs shorter than this (bp)
    },

    # ========================================================================
    # Metrics
    # ========================================================================
    'metrics': {
        'kmer_size': 6,  # k for the extra linguistic complexity column
        'score_floor': 0.01,  # Floor for each score component and the score
    },

    # ========================================================================
    # Output
    # ========================================================================
    'output': {
        'format': 'csv',  # 'csv', 'json'

        # Logging
        'logging': {
            'level': 'INFO',  # 'DEBUG', 'INFO', 'WARNING', 'ERROR'
            'log_file': None,  # e.g. 'contigweaver.log'
        },
    },
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from file or return defaults.

    Args:
        config_path: Path to YAML config file (None = use defaults)

    Returns:
        Configuration dictionary
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path:
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path) as f:
                user_config = yaml.safe_load(f)

            if user_config and not isinstance(user_config, dict):
                raise ValueError(f"Config file {config_path} must contain a mapping")

            # Deep merge user config into defaults
            if user_config:
                config = _deep_merge(config, user_config)

    return config


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def save_config_template(output_path: Path, template: str = 'default'):
    """
    Save a configuration template to file.

    Args:
        output_path: Output file path
        template: Template type ('default', 'strict')
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    # Customize for specific templates
    if template == 'strict':
        config['input']['min_length'] = 200
        config['output']['logging']['level'] = 'WARNING'
    elif template != 'default':
        raise ValueError(f"Unknown configuration template: {template}")

    with open(output_path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def _section(config: Dict[str, Any], name: str, errors: List[str],
             prefix: str = '') -> Dict[str, Any]:
    """Return a config section, recording an error when it is not a mapping."""
    value = config.get(name, {})
    if not isinstance(value, dict):
        errors.append(f"Invalid {prefix}{name}: {value!r} (must be a mapping)")
        return {}
    return value


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []
    metrics = _section(config, 'metrics', errors)
    inputs = _section(config, 'input', errors)
    output = _section(config, 'output', errors)
    logging_config = _section(output, 'logging', errors, prefix='output.')

    # Validate metric parameters
    kmer_size = metrics.get('kmer_size', 6)
    if not isinstance(kmer_size, int) or isinstance(kmer_size, bool) or kmer_size < 1:
        errors.append(f"Invalid metrics.kmer_size: {kmer_size!r} (must be an integer >= 1)")

    score_floor = metrics.get('score_floor', 0.01)
    if (not isinstance(score_floor, (int, float)) or isinstance(score_floor, bool)
            or not 0 < score_floor < 1):
        errors.append(f"Invalid metrics.score_floor: {score_floor!r} (must be in (0, 1))")

    # Validate input filters
    min_length = inputs.get('min_length', 0)
    if not isinstance(min_length, int) or isinstance(min_length, bool) or min_length < 0:
        errors.append(f"Invalid input.min_length: {min_length!r} (must be an integer >= 0)")

    # Validate output settings
    output_format = output.get('format', 'csv')
    if output_format not in VALID_OUTPUT_FORMATS:
        errors.append(f"Invalid output.format: {output_format!r} "
                      f"(choose from {', '.join(VALID_OUTPUT_FORMATS)})")

    level = logging_config.get('level', 'INFO')
    if str(level).upper() not in VALID_LOG_LEVELS:
        errors.append(f"Invalid output.logging.level: {level!r}")

    return errors


__all__ = [
    'DEFAULT_CONFIG',
    'VALID_OUTPUT_FORMATS',
    'VALID_LOG_LEVELS',
    'load_config',
    'save_config_template',
    'validate_config',
]
