"""
Command line interface for Google Fonts metadata
================================================

Batch commands that load a checkout and print what the library resolves.
"""

import logging
import sys
from pathlib import Path

import click

from .core.config import CorpusConfig
from .core.exceptions import ConfigurationError, GFMetadataError
from .google_fonts import GoogleFonts

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Setup logging configuration."""
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT)


def _open_corpus(ctx: click.Context, root: Path | None) -> GoogleFonts:
    config: CorpusConfig = ctx.obj["config"]
    if root is not None:
        config = config.model_copy(update={"repo_dir": root})
    return GoogleFonts.from_config(config)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a YAML configuration file",
)
@click.option("--family-filter", "-f", help="Only load METADATA.pb paths matching this regex")
@click.pass_context
def cli(ctx, verbose, config, family_filter):
    """Google Fonts metadata tools."""
    try:
        settings = CorpusConfig.from_env_and_yaml(yaml_path=config)
        if family_filter:
            settings = CorpusConfig(**{**settings.model_dump(), "family_filter": family_filter})
    except (ConfigurationError, ValueError) as e:
        raise click.BadParameter(str(e)) from e

    setup_logging("DEBUG" if verbose else settings.log_level)
    ctx.ensure_object(dict)
    ctx.obj["config"] = settings


root_argument = click.argument(
    "root", required=False, type=click.Path(exists=True, file_okay=False, path_type=Path)
)


@cli.command()
@root_argument
@click.pass_context
def report(ctx, root):
    """Count usable METADATA.pb and language files."""
    gf = _open_corpus(ctx, root)
    result = gf.report()
    for problem in result.problems:
        click.echo(f"{problem.path}: {problem.reason}", err=True)
    for line in result.summary_lines():
        click.echo(line)


@cli.command()
@root_argument
@click.pass_context
def exemplar(ctx, root):
    """Print the exemplar font of every family."""
    gf = _open_corpus(ctx, root)
    for entry in gf.families():
        if not entry.ok:
            continue
        font = gf.exemplar(entry.family)
        if font is None:
            click.echo(f"{entry.family.name}\t-")
            continue
        binary = gf.find_font_binary(font)
        click.echo(f"{entry.family.name}\t{font.filename}\t{binary or '-'}")


@cli.command(name="primary-language")
@root_argument
@click.pass_context
def primary_language(ctx, root):
    """Print the primary language of every family."""
    gf = _open_corpus(ctx, root)
    try:
        for entry in gf.families():
            if not entry.ok:
                continue
            language = gf.primary_language(entry.family)
            click.echo(f"{entry.family.name}\t{language.id}")
    except GFMetadataError as e:
        logger.exception(f"Primary language resolution failed: {e}")
        sys.exit(1)


@cli.command()
@root_argument
@click.option("--family", "family_name", help="Only print tags of this family")
@click.pass_context
def tags(ctx, root, family_name):
    """Print tags, one per line."""
    gf = _open_corpus(ctx, root)
    try:
        selected = gf.tags_for_family(family_name) if family_name else gf.tags()
    except GFMetadataError as e:
        logger.exception(f"Tag loading failed: {e}")
        sys.exit(1)
    for tag in selected:
        click.echo(str(tag))


if __name__ == "__main__":
    cli()
