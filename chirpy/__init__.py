"""
Chirpy - a tiny chirp validation service with an admin hit counter
"""

__version__ = "0.1.0"
