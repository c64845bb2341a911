"""Utility packages for the street routing system."""
