"""
Read-only REST API over the loaded recommendation dataset.
"""
