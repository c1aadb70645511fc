"""
REST API
"""
