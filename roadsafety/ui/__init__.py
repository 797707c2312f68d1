"""Streamlit rendering: layout, reusable components, and pages."""
