from __future__ import annotations

import typer

from log_unrotate.commands.options import BaseDirOption, ConfigOption
from log_unrotate.commands.setup import open_session
from log_unrotate.config.paths import default_config_path


def open_collection(
    config_path: ConfigOption = default_config_path,
    base_dir: BaseDirOption = None,
) -> None:
    """Open the dated log collection in the file browser."""
    session = open_session(config_path, base_dir)
    collection_root = session.unrotate.collection_root

    try:
        collection_root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        typer.echo(
            typer.style(f"Cannot create {collection_root}: {e}", fg=typer.colors.RED),
            err=True,
        )
        raise typer.Exit(1)

    typer.launch(str(collection_root))
