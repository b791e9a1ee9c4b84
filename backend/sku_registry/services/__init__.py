"""Services Layer: registry orchestration, auth and wiring.

Invariants:
    - Services hold the locks and sessions; decisions come from core/
"""
