"""Module with shared fixtures and a flag to enable tests against a real KBFS mount."""

import pytest

# Stand-in for the keybase binary that serves `keybase fs` from the local disk.
# Paths are used as-is, so the same files are visible through the "mount" and through
# this script.
# Every invocation is recorded in a log file to check which commands were run.
FAKE_KEYBASE = """#!/bin/sh
echo "$*" >> "@LOG@"

if [ "$1" != "fs" ]; then
    echo "ERROR unknown command $1"
    exit 1
fi

case "$2" in
stat)
    if [ ! -e "$3" ]; then
        echo "ERROR file does not exist"
        exit 1
    fi
    echo "$3"
    ;;
read)
    if [ ! -f "$3" ]; then
        echo "ERROR file does not exist"
        exit 1
    fi
    cat "$3"
    ;;
write)
    if [ "$3" = "--append" ]; then
        if [ ! -f "$4" ]; then
            echo "ERROR file does not exist"
            exit 1
        fi
        cat >> "$4"
    else
        mkdir -p "$(dirname "$3")"
        cat > "$3"
    fi
    ;;
rm)
    if [ ! -e "$3" ]; then
        echo "ERROR file does not exist"
        exit 1
    fi
    rm -r "$3"
    ;;
ls)
    if [ ! -d "$5" ]; then
        echo "ERROR file does not exist"
        exit 1
    fi
    ls -1 "$5"
    ;;
*)
    echo "ERROR unknown subcommand $2"
    exit 1
    ;;
esac
"""


def pytest_addoption(parser):
    parser.addoption(
        "--fuse", action="store_true", default=False, help="Run KBFS mount tests"
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "fuse: mark test as requiring KBFS mounted")


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--fuse"):
        skip_fuse = pytest.mark.skip(reason="only runs with --fuse option")

        for item in items:
            if "fuse" in item.keywords:
                item.add_marker(skip_fuse)


@pytest.fixture
def keybase_log(tmp_path):
    return tmp_path / "keybase.log"


@pytest.fixture
def fake_keybase(tmp_path, keybase_log):
    script = tmp_path / "bin" / "keybase"
    script.parent.mkdir()
    script.write_text(FAKE_KEYBASE.replace("@LOG@", str(keybase_log)))
    script.chmod(0o755)

    return str(script)


@pytest.fixture
def keybase_calls(keybase_log):
    def calls():
        if not keybase_log.exists():
            return []

        return keybase_log.read_text().splitlines()

    return calls


@pytest.fixture
def kbfs_root(tmp_path):
    root = tmp_path / "keybase"

    for scope in ["team", "private", "public"]:
        (root / scope).mkdir(parents=True)

    return root
