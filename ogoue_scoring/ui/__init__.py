"""Streamlit simulator UI."""
