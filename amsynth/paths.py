"""Locations of configuration, bank and skin files."""

from __future__ import annotations

import logging
import os
import shutil
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

log = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path(sys.prefix) / "share" / "amsynth"


def _create_dir(path: Path) -> bool:
    try:
        path.mkdir(mode=0o755, parents=True)
    except OSError:
        return False
    return True


def _move(source: Path, target: Path) -> bool:
    try:
        source.rename(target)
    except OSError:
        return False
    return True


def _copy(source: Path, target: Path) -> bool:
    try:
        shutil.copyfile(source, target)
    except OSError:
        return False
    return True


@dataclass
class Filesystem:
    """Where shipped data and per-user preferences live.

    The user paths are None when no home directory is known.
    """

    factory_banks: Path
    skins: Path
    config: Path | None = None
    controllers: Path | None = None
    default_bank: Path | None = None
    user_banks: Path | None = None

    @property
    def config_dir(self) -> Path | None:
        return self.config.parent if self.config else None

    @property
    def data_dir(self) -> Path | None:
        return self.user_banks.parent if self.user_banks else None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str], data_dir: Path) -> Filesystem:
        """Work out the paths following the XDG base directory layout."""
        data_dir = Path(data_dir)
        fs = cls(factory_banks=data_dir / "banks", skins=data_dir / "skins")
        home = environ.get("HOME")
        if not home:
            return fs
        home_path = Path(home)

        config_home = environ.get("XDG_CONFIG_HOME")
        config_root = Path(config_home) if config_home else home_path / ".config"
        config_dir = config_root / "amsynth"
        fs.config = config_dir / "config"
        fs.controllers = config_dir / "controllers"

        data_home = environ.get("XDG_DATA_HOME")
        data_root = Path(data_home) if data_home else home_path / ".local" / "share"
        user_data = data_root / "amsynth"
        fs.user_banks = user_data / "banks"
        fs.default_bank = fs.user_banks / "default"
        return fs

    def prepare(self, home: Path, data_dir: Path) -> list[Path]:
        """Create the user files, migrating legacy ones from the home directory.

        Returns the paths that could not be created.
        """
        config_dir, user_data = self.config_dir, self.data_dir
        if config_dir is None or user_data is None:
            return []
        home, data_dir = Path(home), Path(data_dir)
        failures: list[Path] = []

        _create_dir(config_dir)

        if not self.controllers.exists():
            _move(home / ".amSynthControllersrc", self.controllers)

        if (
            not self.config.exists()
            and not _move(home / ".amSynthrc", self.config)
            and not _copy(data_dir / "rc", self.config)
        ):
            failures.append(self.config)

        if (
            not user_data.exists()
            and not _move(home / ".amsynth", user_data)
            and not (_create_dir(user_data) and _create_dir(self.user_banks))
        ):
            failures.append(user_data)

        if (
            not self.default_bank.exists()
            and not _move(home / ".amSynth.presets", self.default_bank)
            and not _copy(data_dir / "banks" / "amsynth_factory.bank", self.default_bank)
        ):
            failures.append(self.default_bank)

        for path in failures:
            log.error("could not create %s", path)
        return failures


@lru_cache(maxsize=None)
def get_filesystem() -> Filesystem:
    """The process-wide paths, with the user files prepared on first use."""
    fs = Filesystem.from_environ(os.environ, DEFAULT_DATA_DIR)
    home = os.environ.get("HOME")
    if home:
        fs.prepare(Path(home), DEFAULT_DATA_DIR)
    return fs