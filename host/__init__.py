"""Showdown display host: serves hand evaluations to table clients."""

from .server import HostConfig, HostServer

__all__ = ["HostConfig", "HostServer"]
