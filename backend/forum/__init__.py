"""Forum API Package — posts, replies, tags, and users over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
