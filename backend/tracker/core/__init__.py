"""Core — pure domain logic. No IO, no framework imports.

Invariants:
    - Core never imports from api/ or infrastructure/
"""
