"""Attach Lightsail certificates and DNS records to container services."""

# version number like 1.2.3a0, must have at least 2 parts, like 1.2
__version__ = '1.0.0'
