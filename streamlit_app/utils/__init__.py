"""
Utility modules for the Streamlit frontend.

This package contains:
- api_client: Shared recipe gateway for the session
- state: Session state holders for the view controllers and navigation context
"""
