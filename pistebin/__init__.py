"""
Pistebin - share text snippets by short identifier.
"""

__version__ = "1.0.0"
