"""SKU Registry Package: issues, deduplicates and tracks product codes.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
