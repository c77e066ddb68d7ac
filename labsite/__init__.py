"""
labsite - Research lab content browser
"""

__version__ = "0.3.0"
