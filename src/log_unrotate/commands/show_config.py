from __future__ import annotations

import typer

from log_unrotate.commands.options import ConfigOption
from log_unrotate.commands.setup import fail_setup
from log_unrotate.config.paths import default_config_path
from log_unrotate.config.read_config import dump_config, read_config
from log_unrotate.core.errors import SetupError


def show_config(config_path: ConfigOption = default_config_path) -> None:
    """Print the configuration in effect."""
    try:
        config = read_config(config_path)
    except SetupError as e:
        raise fail_setup(e) from e

    typer.echo(f"# {config_path}")
    typer.echo(dump_config(config))
