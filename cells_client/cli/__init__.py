"""
Command line tools for the Cells model layer (`cells-models`).
"""
