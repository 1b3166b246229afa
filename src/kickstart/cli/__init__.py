"""
Command line interface for Kickstart.
"""
