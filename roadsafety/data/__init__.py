"""
Data access layer.

- Pages call `select_source()` and the aggregation helpers only.
- Live reads go through the Google Sheets adapter and fall back to mock data.
- No env var reads here (config-only).
"""
