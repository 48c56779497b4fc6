"""
FastAPI application layer for the chat gateway.

This module exposes the HTTP surface in front of the endpoint option stage:
chat option building, the models catalog, file uploads and health checks.
"""
