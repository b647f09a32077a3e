"""
Vehicle-glass inventory: brands, models and windshield part stock.
"""

__version__ = "1.0.0"
