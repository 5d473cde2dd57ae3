"""Core application for the hospital record backend.

This package contains the record models, their serializers and the
generic REST resources that expose them.
"""
