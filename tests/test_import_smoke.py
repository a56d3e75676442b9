from __future__ import annotations

import importlib
import py_compile
from pathlib import Path


def test_import_smoke():
    pkg = importlib.import_module("anglecore")
    assert pkg.__version__
    importlib.import_module("anglecore.angle")
    importlib.import_module("anglecore.main")


def test_py_compile_smoke(tmp_path: Path):
    root = Path(__file__).resolve().parents[1]
    targets = [
        root / "anglecore" / "angle.py",
        root / "anglecore" / "floats.py",
        root / "anglecore" / "main.py",
    ]
    for src in targets:
        py_compile.compile(str(src), cfile=str(tmp_path / f"{src.name}c"), doraise=True)
