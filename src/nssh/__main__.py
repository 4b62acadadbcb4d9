"""nssh CLI bootstrap."""

from __future__ import annotations

from nssh.cli.app import app

if __name__ == "__main__":
    app()
