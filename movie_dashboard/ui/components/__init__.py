"""
Reusable Streamlit components.
"""
