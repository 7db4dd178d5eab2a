"""
Default locations used by mcfetch.
"""

import os
import pathlib

import platformdirs


class MCFetchSettings:
    """
    Provides the default cache root.
    """

    ROOT_ENV_VAR = "MCFETCH_ROOT"
    DEFAULT_MANIFEST_URL = "https://launchermeta.mojang.com/mc/game/version_manifest.json"

    @staticmethod
    def get_default_root() -> pathlib.Path:
        """
        Returns $MCFETCH_ROOT when set, else the "minecraft" directory in the user config dir.
        """
        override = os.environ.get(MCFetchSettings.ROOT_ENV_VAR)
        if override:
            return pathlib.Path(override).expanduser()
        return pathlib.Path(platformdirs.user_config_dir(appauthor=False)) / "minecraft"
