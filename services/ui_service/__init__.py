"""
UI service - Streamlit rendering of the portfolio page and chat widget.
"""
