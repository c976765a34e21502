"""
HTTP layer for the relay translator
"""
