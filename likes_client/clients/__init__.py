"""
Low-level HTTP adapters used by the high level client.
"""
