"""
Application configuration package.
"""
