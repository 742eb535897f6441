"""Routing — exact-URI route table.

Routes are registered during setup and frozen into an immutable lookup
structure when the app starts serving.
"""
