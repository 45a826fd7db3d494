"""
Serving — FastAPI application exposing the MovieMuse chat over HTTP.
"""
