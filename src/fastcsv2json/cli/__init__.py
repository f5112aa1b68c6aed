"""Command-line front end for fastcsv2json.

``cli`` and ``main`` are resolved on first access so that running
``python -m fastcsv2json.cli.main`` does not find the submodule already
imported (runpy would warn about it).
"""

__all__ = ["cli", "main"]


def __getattr__(name):  # pragma: no cover - trivial lazy import
    if name in {"cli", "main"}:
        from .main import cli as _cli
        from .main import main as _main

        return _cli if name == "cli" else _main
    raise AttributeError(name)
