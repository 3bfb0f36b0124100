from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer


ConfigOption = Annotated[
    Path,
    typer.Option(
        "--config",
        "-c",
        help="YAML configuration file.",
        dir_okay=False,
    ),
]

BaseDirOption = Annotated[
    Optional[Path],
    typer.Option(
        "--base-dir",
        help="Platform data directory holding the source and the collection. "
        "Defaults to 'base_dir' from the configuration, then to LocalLow on Windows.",
        file_okay=False,
    ),
]
