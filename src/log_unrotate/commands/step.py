from __future__ import annotations

import typer

from log_unrotate.commands.options import BaseDirOption, ConfigOption
from log_unrotate.commands.setup import open_session
from log_unrotate.config.paths import default_config_path
from log_unrotate.core.errors import StepError
from log_unrotate.shell.display import UnrotateDisplay


def step(
    config_path: ConfigOption = default_config_path,
    base_dir: BaseDirOption = None,
) -> None:
    """Run a single scan and link pass, then exit."""
    session = open_session(config_path, base_dir)
    display = UnrotateDisplay(session.config["collection"]["app"])

    try:
        report = session.unrotate.step()
    except StepError as e:
        display.show_error(e)
        raise typer.Exit(1)

    display.show_step_report(report, session.unrotate.collection_root)
