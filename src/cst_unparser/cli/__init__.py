"""
Command Line Interface for cst-unparser.
"""
