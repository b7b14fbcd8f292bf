"""Module for the kbfsio settings, with defaults that are overridable by a file."""

from __future__ import annotations

from configparser import ConfigParser, Error as ConfigParserError, SectionProxy
from dataclasses import dataclass, field
import os

from kbfsio.constants import KBFS_ROOT, KEYBASE_BINARY
from kbfsio.logger import log


def _get_path(section: SectionProxy, option: str, default: str) -> str:
    """Read a path option, treating a missing or blank value as not set."""
    value = section.get(option, fallback="").strip()

    return os.path.expanduser(value) if value else default


@dataclass
class KeybaseConfig:
    """Where to find the keybase binary and the KBFS mount."""

    binary: str = KEYBASE_BINARY
    mount_root: str = KBFS_ROOT

    @staticmethod
    def load(section: SectionProxy) -> KeybaseConfig:
        """Load overridden paths from the [keybase] section of a config file."""
        return KeybaseConfig(
            binary=_get_path(section, "binary", KEYBASE_BINARY),
            mount_root=_get_path(section, "mount_root", KBFS_ROOT),
        )


@dataclass
class Config:
    """Configuration variables."""

    keybase: KeybaseConfig = field(default_factory=KeybaseConfig)

    @staticmethod
    def load(filename: str) -> Config:
        """
        Load overridden configuration variables from a config file.

        The config file is optional and only ever changes defaults, so a missing or
        broken file falls back to them instead of preventing access to KBFS.
        """
        path = os.path.expanduser(filename)
        parser = ConfigParser()

        try:
            if not parser.read(path, encoding="utf-8"):
                log.info(f"no config file at {path}")
                return Config()
        except (ConfigParserError, OSError, UnicodeDecodeError) as e:
            log.error(f"failed to read config file {path}: {e}")
            return Config()

        if "keybase" not in parser:
            log.info(f"no [keybase] section in {path}, using defaults")
            return Config()

        config = Config(keybase=KeybaseConfig.load(parser["keybase"]))
        log.info(f"loaded config: {config}")

        return config
