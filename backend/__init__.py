"""
PR Portfolio page server.

Provides a FastAPI app that serves the rendered portfolio page
from the JSON document written by the fetch step.
"""
