"""
Core package for the holiday road-safety operations dashboard.

Submodules provide data loading (Google Sheets or mock fallback),
aggregation, and user interface rendering helpers that are orchestrated by
the top-level `app.py`.
"""
