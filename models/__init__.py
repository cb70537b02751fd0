"""
models/ - Domain Models
=======================
Plain dataclasses describing the data returned by the Clash of Clans API.
"""
