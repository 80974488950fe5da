"""Core Layer: pure domain rules, error taxonomy and store contracts.

Invariants:
    - Core never imports from api/, infrastructure/ or models/
    - No IO here: the shell (routes, store) performs all async calls
"""
