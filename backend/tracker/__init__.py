"""Exercise Tracker Package — users and their logged exercises over a document store.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
