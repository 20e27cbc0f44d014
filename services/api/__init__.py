"""
Local HTTP server for the movie API
"""
