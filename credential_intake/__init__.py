"""Credential Intake - batch validation and storage of refresh-token credentials."""

__version__ = "1.0.0"
