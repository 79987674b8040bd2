"""
Statistical diagnostics for the randomized helpers.

Includes position-frequency tallies and a chi-square uniformity test for
the Fisher–Yates shuffle.
"""
