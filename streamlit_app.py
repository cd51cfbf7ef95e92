"""Streamlit Cloud entrypoint: ``streamlit run streamlit_app.py``."""

from src.ui.app import main

main()
