"""
Command line package
"""
from .main import app

__all__ = ['app']
