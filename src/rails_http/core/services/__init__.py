"""Core services: header composition, request building, error decoding."""
