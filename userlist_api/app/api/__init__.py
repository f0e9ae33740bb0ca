"""
API package: versioned routers and shared dependencies.
"""
