"""
Configuration loading and validation.

Provides a strongly typed settings object for the comparison tolerance, the
default random seed and the log level, with upfront validation.
"""
