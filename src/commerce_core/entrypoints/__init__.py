"""Entrypoints - composition of the application for callers.

Callers obtain a wired Container from build_container() and invoke its
use cases; no HTTP or CLI surface is provided.
"""

from commerce_core.entrypoints.container import Container, bootstrap, build_container

__all__ = ["Container", "bootstrap", "build_container"]
