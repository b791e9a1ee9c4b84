"""Infrastructure Layer: persistence backends and cross-cutting concerns.

Invariants:
    - Infrastructure implements core/ protocols; core never imports from here
    - Storage failures surface as DatabaseError or StoreError
"""
