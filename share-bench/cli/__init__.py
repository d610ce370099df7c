"""
Command runners for the share speed test CLI.
"""
