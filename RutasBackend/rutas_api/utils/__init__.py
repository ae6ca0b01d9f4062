"""Utility helpers package for IDs, dates, and request bodies.

Modules here provide natural-key generation for zones and routes, the
date stamps written on creation and update, and JSON/form body parsing.
"""
