"""
Sinem's Amazing Web App - Core Package

This package contains the web server that greets every visitor with the
same plaintext welcome message, along with its configuration.
"""

__version__ = "1.0.0"
__author__ = "Sinem's Amazing Web App Team"
