"""
Utility modules for the Streamlit frontend.

This package contains:
- state: Session state binding for the RecipeWorkbench
"""
