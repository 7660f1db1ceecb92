"""Example hosts for touchfield.

This package demonstrates framework usage but is not part of the core API.
"""
