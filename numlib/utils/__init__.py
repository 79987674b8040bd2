"""
Generic utility functions shared across modules.

Includes the injectable random source abstraction and logging setup.
"""
