"""
docnav - persistent navigation trees for documentation sites
"""

__version__ = "0.3.0"
