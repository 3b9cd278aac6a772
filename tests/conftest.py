"""Shared pytest fixtures and configuration for the npls test suite.

Guidelines
----------
* No internet access in any test.
* A real npm is never invoked; end-to-end tests use a stub script.
* Core tests must be pure — no side effects.
* Scratch directories live under ``tmp_path``, never the real temp root.
"""

from __future__ import annotations

import stat
import sys
import textwrap
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

_FAKE_NPM = textwrap.dedent(
    """\
    import json
    import os
    import sys

    command, args = sys.argv[1], sys.argv[2:]

    log = os.environ.get("NPLS_FAKE_LOG")
    if log:
        with open(log, "a", encoding="utf-8") as fh:
            fh.write(json.dumps([command, *args]) + "\\n")

    fail = os.environ.get("NPLS_FAKE_FAIL", "")
    if fail.startswith(command + "="):
        sys.exit(int(fail.split("=", 1)[1]))

    manifest = "package.json"

    if command == "init":
        data = {"name": os.path.basename(os.getcwd()), "version": "1.0.0"}
        with open(manifest, "w", encoding="utf-8") as fh:
            json.dump(data, fh)
    elif command == "install":
        with open(manifest, encoding="utf-8") as fh:
            data = json.load(fh)
        deps = data.setdefault("dependencies", {})
        for ref in args:
            if not ref.startswith("-"):
                deps[ref] = "1.3.0"
        with open(manifest, "w", encoding="utf-8") as fh:
            json.dump(data, fh)
    elif command == "ls":
        with open(manifest, encoding="utf-8") as fh:
            data = json.load(fh)
        deps = data.get("dependencies", {})
        cwd = os.getcwd()
        if "--json" in args:
            print(json.dumps({
                "version": data["version"],
                "name": data["name"],
                "path": cwd,
                "dependencies": {
                    name: {"version": version, "path": os.path.join(cwd, "node_modules", name)}
                    for name, version in deps.items()
                },
            }, indent=2))
        else:
            print("")
            print(f"{data['name']}@{data['version']} {cwd}")
            for name, version in deps.items():
                print(f"`-- {name}@{version}")
            print("")
    """
)


@pytest.fixture(autouse=True)
def _reset_loguru() -> Iterator[None]:
    """Drop sinks bound to captured streams once a test finishes."""
    yield
    logger.remove()


@pytest.fixture
def temp_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the system temp root used for workspaces at ``tmp_path``."""
    root = tmp_path / "tmproot"
    root.mkdir()
    monkeypatch.setattr("npls.infra.workspace.tempfile.gettempdir", lambda: str(root))
    return root


@pytest.fixture
def fake_npm(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Install a stub ``npm`` and make the CLI use it.

    The stub appends each invocation to the file named by
    ``NPLS_FAKE_LOG`` and exits with ``N`` for subcommand ``cmd`` when
    ``NPLS_FAKE_FAIL=cmd=N`` is set.
    """
    if sys.platform == "win32":
        pytest.skip("stub executable relies on a shebang line")

    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "npm"
    script.write_text(f"#!{sys.executable}\n{_FAKE_NPM}", encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    log = tmp_path / "npm-calls.jsonl"
    monkeypatch.setenv("NPLS_FAKE_LOG", str(log))
    monkeypatch.delenv("NPLS_FAKE_FAIL", raising=False)
    monkeypatch.setattr("npls.cli.app.PACKAGE_MANAGER", str(script))
    return log
