"""
Unit tests.
"""
