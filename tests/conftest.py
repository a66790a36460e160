"""Shared fixtures for autoreg-di tests."""

import importlib
import sys
import textwrap

import pytest


@pytest.fixture
def write_package(tmp_path, monkeypatch):
    """Write an importable package under a temporary directory.

    Returns a function taking the package name and a mapping of relative file
    paths to source code. Modules imported from written packages are removed
    from ``sys.modules`` after the test.
    """
    monkeypatch.syspath_prepend(str(tmp_path))
    written = []

    def write(name, files):
        for relative_path, source in files.items():
            path = tmp_path / name / relative_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(source))
        importlib.invalidate_caches()
        written.append(name)
        return name

    yield write

    for name in written:
        for module_name in list(sys.modules):
            if module_name == name or module_name.startswith(f"{name}."):
                del sys.modules[module_name]
