# site_mapper/__init__.py
"""
site_mapper package initializer.
Defines the package version; the CLI lives in :mod:`site_mapper.cli`.
"""
__version__ = "0.1.0"
