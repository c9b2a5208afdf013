"""Internal modules for the QStash SDK.

WARNING: These modules are implementation details of QStashClient and may
change without notice. Import public names from ``qstash_sdk`` instead.

Modules:
    publish - Destination resolution, header encoding, response decoding
    messages - Models for the read endpoints
    http - Shared HTTP client configuration
    redaction - Header redaction for debug output
"""
