#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigWeaver v0.1.0

Tests for configuration loading, templates and validation.

Author: ContigWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import copy

import pytest
import yaml

from contigweaver.config.parser import ConfigParser, ConfigValidationError
from contigweaver.config.schema import (
    DEFAULT_CONFIG,
    load_config,
    save_config_template,
    validate_config,
)
from contigweaver import ContigWeaverError


# ═══════════════════════════════════════════════════════════════════════
#  Schema helpers
# ═══════════════════════════════════════════════════════════════════════

class TestLoadConfig:
    """Defaults and YAML deep merge."""

    def test_defaults(self):
        config = load_config()

        assert config['metrics']['kmer_size'] == 6
        assert config['metrics']['score_floor'] == 0.01
        assert config['input']['min_length'] == 0
        assert config['output']['format'] == 'csv'

    def test_defaults_are_not_shared(self):
        config = load_config()
        config['metrics']['kmer_size'] = 99

        assert DEFAULT_CONFIG['metrics']['kmer_size'] == 6

    def test_deep_merge(self, temp_output_dir):
        path = temp_output_dir / "cfg.yaml"
        path.write_text(yaml.dump({'metrics': {'kmer_size': 4}}))

        config = load_config(path)

        assert config['metrics']['kmer_size'] == 4
        assert config['metrics']['score_floor'] == 0.01

    def test_empty_file(self, temp_output_dir):
        path = temp_output_dir / "empty.yaml"
        path.write_text("")

        assert load_config(path) == load_config()

    def test_top_level_list_rejected(self, temp_output_dir):
        path = temp_output_dir / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            load_config(path)


class TestTemplates:
    """Template writer."""

    def test_default_template_round_trips(self, temp_output_dir):
        path = temp_output_dir / "default.yaml"
        save_config_template(path)

        assert load_config(path) == load_config()

    def test_strict_template(self, temp_output_dir):
        path = temp_output_dir / "strict.yaml"
        save_config_template(path, template='strict')

        config = load_config(path)
        assert config['input']['min_length'] == 200
        assert validate_config(config) == []

    def test_unknown_template(self, temp_output_dir):
        with pytest.raises(ValueError):
            save_config_template(temp_output_dir / "x.yaml", template='bogus')


class TestValidateConfig:
    """Error reporting."""

    def test_defaults_valid(self):
        assert validate_config(copy.deepcopy(DEFAULT_CONFIG)) == []

    @pytest.mark.parametrize("section,key,value", [
        ('metrics', 'kmer_size', 0),
        ('metrics', 'kmer_size', 'six'),
        ('metrics', 'kmer_size', True),
        ('metrics', 'score_floor', 0.0),
        ('metrics', 'score_floor', 1.5),
        ('input', 'min_length', -1),
        ('output', 'format', 'xlsx'),
    ])
    def test_invalid_values(self, section, key, value):
        config = copy.deepcopy(DEFAULT_CONFIG)
        config[section][key] = value

        errors = validate_config(config)

        assert len(errors) == 1
        assert f"{section}.{key}" in errors[0]

    def test_invalid_log_level(self):
        config = copy.deepcopy(DEFAULT_CONFIG)
        config['output']['logging']['level'] = 'LOUD'

        assert len(validate_config(config)) == 1

    @pytest.mark.parametrize("section", ['metrics', 'input', 'output'])
    def test_null_section_reported(self, section):
        config = copy.deepcopy(DEFAULT_CONFIG)
        config[section] = None

        errors = validate_config(config)

        assert errors == [f"Invalid {section}: None (must be a mapping)"]

    def test_null_logging_section_reported(self):
        config = copy.deepcopy(DEFAULT_CONFIG)
        config['output']['logging'] = None

        assert validate_config(config) == ["Invalid output.logging: None (must be a mapping)"]


# ═══════════════════════════════════════════════════════════════════════
#  ConfigParser
# ═══════════════════════════════════════════════════════════════════════

class TestConfigParser:
    """Dotted access, overrides and env substitution."""

    def test_dotted_get(self):
        parser = ConfigParser()

        assert parser.get('metrics.kmer_size') == 6
        assert parser.get('output.logging.level') == 'INFO'
        assert parser.get('metrics.missing', 'fallback') == 'fallback'

    def test_cli_overrides_skip_none(self):
        parser = ConfigParser()
        parser.merge_cli_overrides({'metrics.kmer_size': 3, 'input.min_length': None})

        assert parser.get('metrics.kmer_size') == 3
        assert parser.get('input.min_length') == 0

    def test_env_substitution(self, temp_output_dir, monkeypatch):
        monkeypatch.setenv('CW_LOG', 'metrics.log')
        path = temp_output_dir / "cfg.yaml"
        path.write_text(
            "output:\n"
            "  logging:\n"
            "    log_file: ${CW_LOG}\n"
            "    level: ${CW_LEVEL:-DEBUG}\n"
        )

        parser = ConfigParser(path)

        assert parser.get('output.logging.log_file') == 'metrics.log'
        assert parser.get('output.logging.level') == 'DEBUG'

    def test_missing_file(self, temp_output_dir):
        with pytest.raises(FileNotFoundError):
            ConfigParser(temp_output_dir / "nope.yaml")

    def test_invalid_yaml(self, temp_output_dir):
        path = temp_output_dir / "bad.yaml"
        path.write_text("metrics: [unclosed\n")

        with pytest.raises(ConfigValidationError):
            ConfigParser(path)

    def test_validate_raises(self):
        parser = ConfigParser()
        parser.merge_cli_overrides({'metrics.kmer_size': 0})

        with pytest.raises(ConfigValidationError, match="kmer_size"):
            parser.validate()

    def test_override_into_null_section(self, temp_output_dir):
        path = temp_output_dir / "null.yaml"
        path.write_text("metrics: null\n")
        parser = ConfigParser(path)
        parser.merge_cli_overrides({'metrics.kmer_size': 4})

        with pytest.raises(ConfigValidationError, match="must be a mapping"):
            parser.validate()

    def test_error_hierarchy(self):
        assert issubclass(ConfigValidationError, ContigWeaverError)

# ContigWeaver v0.1.0
# Any usage is subject to this software's license.
