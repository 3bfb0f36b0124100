from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import typer

from log_unrotate.config.logging_config import setup_logging
from log_unrotate.config.paths import log_dir_for, resolve_base_dir
from log_unrotate.config.read_config import read_config
from log_unrotate.core.errors import SetupError
from log_unrotate.core.unrotate import Unrotate

if TYPE_CHECKING:
    from pathlib import Path

    from log_unrotate.config.config_type_hint import UnrotateConfig


@dataclass
class Session:
    """Everything a command needs once setup succeeded."""

    config: UnrotateConfig
    base_dir: Path
    unrotate: Unrotate


def fail_setup(error: SetupError) -> typer.Exit:
    typer.echo(typer.style(f"Setup failed: {error}", fg=typer.colors.RED), err=True)
    return typer.Exit(1)


def open_session(config_path: Path, base_dir: Path | None) -> Session:
    """
    Load configuration, resolve directories and configure logging.

    :param config_path: YAML configuration file.
    :param base_dir: Command line override of the base directory.
    :raises typer.Exit: On any setup error, after printing it.
    :return: The session.
    """
    try:
        config = read_config(config_path)
        resolved = resolve_base_dir(config, base_dir)
        setup_logging(log_dir_for(config, resolved), config["logging"])
    except SetupError as e:
        raise fail_setup(e) from e
    except OSError as e:
        raise fail_setup(SetupError(f"Cannot prepare directories: {e}")) from e

    return Session(
        config=config,
        base_dir=resolved,
        unrotate=Unrotate.from_config(config, resolved),
    )
