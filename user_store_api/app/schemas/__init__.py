"""
Pydantic schema definitions for API payloads and the on‑disk snapshot.
"""
