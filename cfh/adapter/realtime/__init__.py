"""Realtime adapters."""

from cfh.adapter.realtime.broadcaster import Broadcaster

__all__ = ["Broadcaster"]
