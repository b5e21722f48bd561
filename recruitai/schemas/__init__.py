"""
Schemas module - Request/Response schemas for API endpoints.
"""
