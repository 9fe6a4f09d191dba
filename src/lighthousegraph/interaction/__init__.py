"""Pointer interaction for the dependency graph view."""

from lighthousegraph.interaction.controller import InteractionController, Navigator

__all__ = ["InteractionController", "Navigator"]
