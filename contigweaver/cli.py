#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for ContigWeaver.

This module provides the main CLI entry point and all subcommands for
computing per-contig quality metrics of a transcriptome assembly.
"""

import logging
import sys
import click
from pathlib import Path
import yaml

from .version import __version__
from .config.parser import ConfigParser, ConfigValidationError
from .config.schema import (
    VALID_OUTPUT_FORMATS,
    load_config,
    save_config_template,
    validate_config,
)
from .io.fasta import metrics_row, read_contigs, write_metrics

logger = logging.getLogger(__name__)


def setup_logging(level: str = 'INFO', log_file=None, verbose: bool = False,
                  quiet: bool = False):
    """Configure root logging from CLI flags and the logging config section."""
    if verbose:
        level = 'DEBUG'
    elif quiet:
        level = 'ERROR'

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.pass_context
def main(ctx, verbose, quiet):
    """
    ContigWeaver: per-contig quality metrics for transcriptome assemblies

    Computes composition, ORF, k-mer complexity and score metrics for every
    contig of an assembly.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='contigweaver_config.yaml',
              help='Output configuration file path')
@click.option('--template', '-t',
              type=click.Choice(['default', 'strict']),
              default='default', help='Configuration template type')
def config_init(output, template):
    """Generate a template configuration file with all available parameters."""
    click.echo(f"Generating {template} configuration template: {output}")

    try:
        save_config_template(Path(output), template=template)
    except OSError as e:
        click.echo(f"✗ Error creating configuration: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Configuration file created: {output}")


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    click.echo(f"Validating configuration file: {config_file}")

    try:
        config = load_config(Path(config_file))
    except (yaml.YAMLError, ValueError) as e:
        click.echo(f"✗ Error validating configuration: {e}", err=True)
        sys.exit(1)

    errors = validate_config(config)
    if errors:
        click.echo("\n✗ Configuration validation failed:")
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    click.echo("✓ Configuration is valid")
    click.echo("\nKey Settings:")
    click.echo(f"  K-mer size: {config['metrics']['kmer_size']}")
    click.echo(f"  Score floor: {config['metrics']['score_floor']}")
    click.echo(f"  Output format: {config['output']['format']}")


@config.command('show')
@click.argument('config_file', type=click.Path(exists=True))
@click.option('--format', '-f', type=click.Choice(['yaml', 'summary']), default='summary',
              help='Output format')
def config_show(config_file, format):
    """Display configuration settings."""
    try:
        config = load_config(Path(config_file))
    except (yaml.YAMLError, ValueError) as e:
        click.echo(f"✗ Error reading configuration: {e}", err=True)
        sys.exit(1)

    if format == 'yaml':
        click.echo(yaml.dump(config, default_flow_style=False, sort_keys=False))
        return

    errors = validate_config(config)
    if errors:
        click.echo("✗ Configuration is invalid:", err=True)
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    click.echo(f"Configuration from: {config_file}")
    click.echo("=" * 60)
    click.echo("\nInput:")
    click.echo(f"  Minimum contig length: {config['input']['min_length']}")
    click.echo("\nMetrics:")
    click.echo(f"  K-mer size: {config['metrics']['kmer_size']}")
    click.echo(f"  Score floor: {config['metrics']['score_floor']}")
    click.echo("\nOutput:")
    click.echo(f"  Format: {config['output']['format']}")
    click.echo(f"  Log level: {config['output']['logging']['level']}")


# ============================================================================
# Metric Commands
# ============================================================================

@main.command()
@click.option('--input', '-i', 'input_file', required=True, type=click.Path(exists=True),
              help='Assembly FASTA file (can be gzipped)')
@click.option('--output', '-o', required=True, type=click.Path(),
              help='Output metrics file')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              help='Configuration file (YAML)')
@click.option('--kmer-size', '-k', type=int, default=None,
              help='Extra linguistic complexity k (default from config: 6)')
@click.option('--min-length', type=int, default=None,
              help='Skip contigs shorter than this')
@click.option('--format', '-f', 'output_format', type=click.Choice(VALID_OUTPUT_FORMATS),
              default=None, help='Output format')
@click.pass_context
def metrics(ctx, input_file, output, config_file, kmer_size, min_length, output_format):
    """Compute per-contig metrics for an assembly."""
    try:
        parser = ConfigParser(config_file)
        parser.merge_cli_overrides({
            'metrics.kmer_size': kmer_size,
            'input.min_length': min_length,
            'output.format': output_format,
        })
        parser.validate()
    except ConfigValidationError as e:
        click.echo(f"✗ Invalid configuration: {e}", err=True)
        sys.exit(1)

    setup_logging(
        level=parser.get('output.logging.level', 'INFO'),
        log_file=parser.get('output.logging.log_file'),
        verbose=ctx.obj.get('VERBOSE', False),
        quiet=ctx.obj.get('QUIET', False),
    )

    k = parser.get('metrics.kmer_size')
    logger.info("Computing contig metrics for %s", input_file)

    contigs = read_contigs(
        input_file,
        min_length=parser.get('input.min_length'),
        score_floor=parser.get('metrics.score_floor'),
    )
    count = write_metrics(
        (metrics_row(contig, extra_k=k) for contig in contigs),
        output,
        output_format=parser.get('output.format'),
    )

    if not ctx.obj.get('QUIET'):
        click.echo(f"✓ Metrics for {count} contigs written to {output}")


if __name__ == '__main__':
    main()
