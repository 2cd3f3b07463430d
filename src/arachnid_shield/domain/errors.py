# Licensed under the Apache License, Version 2.0


class ShieldError(Exception):
    """Base exception for client-side errors."""


class ConfigurationError(ShieldError):
    """Unusable client configuration, such as a base URL without an http(s) scheme."""
