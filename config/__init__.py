"""
Configuration package for ReviewDesk.
"""
