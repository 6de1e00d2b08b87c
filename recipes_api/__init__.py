"""
Table Recipes API: recipe catalog and per-user favorites backed by MongoDB.
"""
