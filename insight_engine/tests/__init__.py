"""
Test suite for the insight engine.
"""
