"""Allows `python -m rails_http ...`."""

from __future__ import annotations

from rails_http.cli.main import run

if __name__ == "__main__":
    run()
