from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from log_unrotate.core.errors import SetupError

if TYPE_CHECKING:
    from log_unrotate.config.config_type_hint import UnrotateConfig

default_config_path: Path = Path(__file__).parent.joinpath("unrotate.yaml")


def get_appdata_locallow() -> Path | None:
    """
    Locate ``%USERPROFILE%\\AppData\\LocalLow`` on Windows.

    LocalLow sits next to the Local folder that ``LOCALAPPDATA`` points to.

    :return: The directory, or None off Windows or when it cannot be found.
    """
    if sys.platform != "win32":
        return None

    local_appdata = os.environ.get("LOCALAPPDATA")
    if not local_appdata:
        return None

    return Path(local_appdata).parent.joinpath("LocalLow")


def resolve_base_dir(
    config: UnrotateConfig,
    override: Path | None = None,
) -> Path:
    """
    Decide which platform data directory the collector works in.

    The command line override wins over ``base_dir`` in the configuration,
    which wins over the Windows LocalLow folder.

    :param config: Loaded configuration.
    :param override: Directory given on the command line.
    :raises SetupError: If no directory can be determined.
    :return: The base directory.
    """
    if override is not None:
        return override

    configured = config.get("base_dir")
    if configured:
        return Path(configured).expanduser()

    locallow = get_appdata_locallow()
    if locallow is None:
        raise SetupError(
            "Failed to get the LocalAppDataLow path; set 'base_dir' in the "
            "configuration or pass --base-dir",
        )
    return locallow


def log_dir_for(config: UnrotateConfig, base_dir: Path) -> Path:
    """Directory of the collector's own log files, beside the collection."""
    collection = config["collection"]
    return base_dir.joinpath(collection["vendor"], collection["app"], "logs")
