"""Test suite for the Table Recipes API."""
