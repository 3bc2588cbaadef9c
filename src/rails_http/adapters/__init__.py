"""Adapters: everything that touches I/O (httpx, environment, HTML pages)."""
