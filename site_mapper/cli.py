# === FILE: site_mapper/cli.py ===
#!/usr/bin/env python3
"""
Command line entry point of site_mapper.

Commands:
  crawl     Crawl the site, write sitemap.xml and optional reports
  config    Show the effective configuration

Common options:
  --config PATH       Path to the YAML/JSON config (default: configs/default.yaml)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stdout only if not given)
  --log-format FORMAT Logging format string

crawl options:
  --sitemap PATH      Write sitemap.xml here (overrides sitemapPath)
  --check-external / --no-check-external
                      Fetch external links to verify them (overrides checkExternalLinks)
  --json PATH         Save the JSON crawl report
  --html PATH         Save the HTML crawl report
  --template DIR      Directory with Jinja2 templates
  --pretty            Indent JSON output
  --fail-on-error     Exit with status 1 if any page failed

Example:
  site-mapper --config configs/default.yaml crawl --sitemap build/sitemap.xml --json build/report.json
"""
import sys
import asyncio
from pathlib import Path

import click

from site_mapper import __version__
from site_mapper.config import load_config
from site_mapper.logger import init_logging
from site_mapper.engine import start_crawl
from site_mapper.report.json_report import render_json
from site_mapper.report.html_report import render_html

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='site_mapper, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default='configs/default.yaml',
    show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Path to the YAML or JSON configuration file.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stdout if not given)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """site_mapper: crawl a site and build its sitemap.xml."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--sitemap', '-s', 'sitemap_path',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Write sitemap.xml to this path'
)
@click.option(
    '--check-external/--no-check-external', 'check_external',
    default=None,
    help='Fetch external links to check that they are alive'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the JSON crawl report'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the HTML crawl report'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Directory with Jinja2 templates (bundled template by default)'
)
@click.option(
    '--pretty', is_flag=True,
    help='Indent JSON output'
)
@click.option(
    '--fail-on-error', is_flag=True,
    help='Exit with status 1 if any page failed to load'
)
@click.pass_context
def crawl(ctx, sitemap_path, check_external, json_output, html_output, template_dir, pretty, fail_on_error):
    """Crawl the site, write the sitemap and the reports."""
    cfg = ctx.obj['config']
    overrides = {}
    if sitemap_path is not None:
        overrides['sitemap_path'] = sitemap_path
    if check_external is not None:
        overrides['check_external_links'] = check_external
    if overrides:
        cfg = cfg.model_copy(update=overrides)

    try:
        report = asyncio.run(start_crawl(cfg))
    except Exception as e:
        print_error(f'Crawl failed: {e}')

    if not json_output and not html_output:
        click.echo(report.json(pretty=pretty))

    if json_output:
        try:
            saved_json = render_json(report, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Failed to save JSON report: {e}')

    if html_output:
        try:
            saved_html = render_html(report, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Failed to save HTML report: {e}')

    if fail_on_error and report.has_errors:
        print_error(f'{len(report.errors)} page(s) failed to load')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Print the effective configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2, by_alias=True))


if __name__ == "__main__":
    cli()
