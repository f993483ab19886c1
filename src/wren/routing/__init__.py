"""Routing — an ordered route table matched first-to-last.

Routes are registered during setup and compiled into immutable
patterns when the app freezes.
"""
