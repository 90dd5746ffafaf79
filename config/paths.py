"""Centralized file path configuration.

Env files are looked up relative to the current working directory first,
then in the user's configuration directory.
"""

import os
from pathlib import Path

# Plain .env in the working directory
ENV_FILE = Path(".env")

# Dedicated config file in the working directory
CONFIG_FILE_NAME = "config.env"
LOCAL_CONFIG_FILE = Path(CONFIG_FILE_NAME)

# ${XDG_CONFIG_HOME:-~/.config}/footballscore/config.env
CONFIG_HOME = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
USER_CONFIG_FILE = CONFIG_HOME / "footballscore" / CONFIG_FILE_NAME
