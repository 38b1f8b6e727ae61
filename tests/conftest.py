import os
import subprocess
import sys
import textwrap
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = Path(__file__).resolve().parent / "test_data"

LOCAL_PKG = "github.com/peterebden/goisort"


def write(p: Path, text: str) -> Path:
    """Write text to a file, creating parent directories as needed."""
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


def go_source(body: str) -> str:
    """Dedent a Go snippet and make sure it ends with a newline."""
    return textwrap.dedent(body).lstrip("\n")


def run_cli(root: Path, *args: str) -> subprocess.CompletedProcess:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "goisort", *args],
        cwd=root, env=env, capture_output=True, text=True, encoding="utf-8"
    )


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def go_file(tmp_path: Path):
    """Factory: write a Go snippet into tmp_path and return its path."""
    def _make(body: str, name: str = "main.go") -> Path:
        return write(tmp_path / name, go_source(body))
    return _make
