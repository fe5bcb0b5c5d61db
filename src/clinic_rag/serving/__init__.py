"""
Serving — FastAPI application for grounded document chat.

Run with ``uvicorn clinic_rag.serving.app:app``.
"""
