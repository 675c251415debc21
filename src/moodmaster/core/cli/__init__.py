"""Moodmaster CLI: entry point for the report commands."""

import click

from moodmaster import __version__


@click.group()
@click.version_option(version=__version__, package_name="moodmaster")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), help="YAML or JSON config file.")
@click.pass_context
def main(ctx: click.Context, config_file: str | None) -> None:
    """Moodmaster: insights and calendars from your mood records."""
    from moodmaster.core.cli.common import load_config

    config = load_config(config_file)
    ctx.obj = config


from .report_cmd import insights, month, trend

main.add_command(insights)
main.add_command(month)
main.add_command(trend)
