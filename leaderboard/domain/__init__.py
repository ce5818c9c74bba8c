"""Domain layer (pure logic).

- Keep ranking rules here.
- Avoid I/O: no Redis, no files.
"""
