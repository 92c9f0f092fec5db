"""Core (UI-agnostic) program explorer logic.

This package contains:
- data loading (CSV -> pandas, validated against the row schemas)
- facet extraction (sponsor and session type choice lists, default day)
- keyword matching shared by both views
- session and talk filter engines (JSON-serializable payloads)
- chart helpers (Altair -> Vega-Lite spec dict)
"""
