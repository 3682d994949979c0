"""
IPCalc command line entry point.
"""

import click

from ipcalc import __version__
from ipcalc.config import get_config
from ipcalc.logging_config import setup_logging
from ipcalc.ip.cli import ip


@click.group()
@click.version_option(__version__, prog_name="ipcalc")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write logs to this file")
def main(debug: bool, log_file: str | None):
    """IPCalc - IPv4 subnet arithmetic for network engineers."""
    config = get_config()
    log_file = log_file or config.log_file
    setup_logging(level="DEBUG" if debug else config.log_level, log_file=log_file)


main.add_command(ip)


if __name__ == "__main__":
    main()
