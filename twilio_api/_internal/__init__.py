"""Internal modules for the Twilio API client.

WARNING: This package contains the machinery behind the resource wrappers.
These are not intended for direct use in application code.

Modules:
    dispatch - Generic request dispatch and response decoding
    http - Shared HTTP client configuration
"""
