"""Packaged resources for rit."""
