"""Core Layer — pure catalog logic, no IO, no async, no FastAPI.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Functions are pure; randomness enters only through a Shuffler
"""
