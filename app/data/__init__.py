"""
Data access + derivation layer.

Design rules:
- Views call ONLY functions in this package.
- Reads happen once per page; filters/aggregates are pure functions over that snapshot.
- No env var reads here (config-only).
"""
