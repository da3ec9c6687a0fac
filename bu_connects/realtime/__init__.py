"""Realtime infrastructure (Socket.IO).

One socket server carries chat fan-out and per-user notification pushes.
"""
