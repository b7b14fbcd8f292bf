"""Module defining various global constants."""

# kbfsio version
VERSION = "1.0.0"

# Special exit code for when kbfsio itself fails.
KBFSIO_ERROR_CODE = 254

# Name of the keybase control binary, looked up on PATH unless configured otherwise.
KEYBASE_BINARY = "keybase"

# Root of the KBFS FUSE mount and the top-level scopes that must exist beneath it
KBFS_ROOT = "/keybase"
KBFS_SCOPES = ("team", "private", "public")

# Default location of the config file
CONFIG_PATH = "~/.kbfsio/config"
