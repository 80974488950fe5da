"""Posts API Package: REST surface over blog posts and their comments.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
