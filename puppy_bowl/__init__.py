"""Puppy Bowl roster manager: a Dash front end for the Puppy Bowl API."""

__version__ = "0.1.0"
