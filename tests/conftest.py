"""Fixtures da suíte de testes do interpretador Silli."""
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from interpreter import Interpreter, RunState
from registry import default_registry


@pytest.fixture
def state():
    """Tabelas vazias de uma execução."""
    return RunState()


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def interpreter():
    return Interpreter()


@pytest.fixture
def program_file(tmp_path):
    """Grava um programa Silli em disco e devolve o caminho."""
    def _write(code, name="program.sil"):
        path = tmp_path / name
        path.write_text(code, encoding="utf-8")
        return path
    return _write
