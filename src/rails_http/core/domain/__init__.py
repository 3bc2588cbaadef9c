"""Domain values.

Why:
- Pure, immutable data (results, errors, bodies, conventions).
- The domain knows nothing about httpx, the CLI, or the environment.
"""
