import pytest
from rich.console import Console

from phrasehunter.console import RichLogger


@pytest.fixture
def logger():
    quiet = Console(quiet=True)
    return RichLogger(console=quiet, err_console=quiet, verbose=True)


@pytest.fixture
def write_doc(tmp_path):
    def _write(lines, name="doc.txt", newline="\n"):
        path = tmp_path / name
        path.write_bytes(newline.join(lines).encode("utf-8"))
        return path

    return _write
