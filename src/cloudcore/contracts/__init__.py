"""Contracts — structural interfaces for cloud providers.

Each contract is a :class:`typing.Protocol` so provider adapters (blob
storage, messaging, identity, notification and so on) plug in without
inheriting from cloudcore.  Small concrete value types that every provider
shares (``EntityMessageCount``, ``SignedAccessConfig``, notification
messages) are pydantic models defined beside their protocols.
"""
