"""Core (UI-agnostic) energy dashboard logic.

This package contains:
- code normalization (any string -> 3-digit code)
- flow derivation and chart-data shaping (pure functions of the code)
- input collection and geocoding helpers used by the UI/API layers
- chart helpers (Altair -> Vega-Lite spec dict)
"""
