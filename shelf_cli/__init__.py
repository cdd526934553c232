"""Command line interface for the book library"""
from .main import cli

__all__ = ['cli']
