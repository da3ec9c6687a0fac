"""Domain-specific realtime payloads and publishers.

These modules should contain payload builders and *publish* helpers only.
They must not define Socket.IO server instances or connection handlers.
"""
