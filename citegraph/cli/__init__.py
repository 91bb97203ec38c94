"""
CLI Package

Command-line entry points.
"""
