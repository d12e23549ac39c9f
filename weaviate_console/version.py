"""
Version of the Weaviate Console.
"""

__version__ = "1.0.0"
