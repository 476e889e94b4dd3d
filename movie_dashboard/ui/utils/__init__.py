"""
API client and session state helpers for the dashboard.
"""
