"""
API routers for the Resume Builder API
"""
