"""Runtime settings for holidaycalendars."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values

from holidaycalendars.config.constants import DATA_PATH_ENV_VAR
from holidaycalendars.utils.paths import get_bundled_data_dir

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepositoryConfig:
    """Where calendar documents are read from."""

    data_path: Path

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "RepositoryConfig":
        """Resolve the document root.

        The process environment wins, then a ``.env`` file, then the
        documents bundled with the package.

        Args:
            env_file: Optional path to a ``.env`` file. Defaults to ``.env``
                in the current working directory.

        Returns:
            A RepositoryConfig pointing at the resolved directory.
        """
        value = os.environ.get(DATA_PATH_ENV_VAR)

        if not value:
            path = env_file if env_file is not None else Path.cwd() / ".env"
            if path.exists():
                # Parse without mutating os.environ
                value = dotenv_values(path).get(DATA_PATH_ENV_VAR)

        if value:
            data_path = Path(str(value).strip().strip("'\"")).expanduser()
            logger.debug("Using calendar documents from %s", data_path)
            return cls(data_path=data_path)

        return cls(data_path=get_bundled_data_dir())


REPOSITORY_CONFIG = RepositoryConfig.from_env()
