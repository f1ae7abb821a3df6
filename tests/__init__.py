"""Test package for the RAG pipeline.

Structure:
    - unit/: Individual function and class tests
    - integration/: HTTP API workflows against a real session

Test PDFs are generated in fixtures; remote backends are replaced with
httpx.MockTransport or in-process doubles.
"""
