"""
Core Package

Cross-cutting configuration, constants and logging utilities.
"""
