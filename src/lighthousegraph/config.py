"""Typed settings loaded from config.yaml."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class DataStoreSettings(BaseModel):
    """Where the dependency records live and how node detail links are built."""

    url: str = (
        "https://raw.githubusercontent.com/Be-Secure/besecure-assets-store/"
        "main/models/model-metadata.json"
    )
    timeout_seconds: float = Field(10.0, gt=0.0)
    detail_base_path: str = "/BeSLighthouse/model_report/"


class LayoutSettings(BaseModel):
    """Force simulation constants."""

    alpha_start: float = Field(1.0, ge=0.0, le=1.0)
    alpha_min: float = Field(0.001, gt=0.0, lt=1.0)
    alpha_decay: float | None = Field(
        None, gt=0.0, lt=1.0, description="None = derived from alpha_min over 300 ticks"
    )
    alpha_target: float = Field(0.0, ge=0.0, le=1.0)
    velocity_decay: float = Field(0.4, ge=0.0, le=1.0)
    charge_strength: float = -250.0
    charge_distance_min: float = Field(1.0, gt=0.0)
    charge_distance_max: float | None = Field(None, gt=0.0)
    link_distance: float = Field(30.0, ge=0.0)
    link_strength_scale: float = Field(1.0, ge=0.0)
    center_strength: float = Field(0.1, ge=0.0)

    @property
    def effective_alpha_decay(self) -> float:
        if self.alpha_decay is not None:
            return self.alpha_decay
        return 1.0 - self.alpha_min ** (1.0 / 300.0)


class InteractionSettings(BaseModel):
    """Drag re-energizing behaviour."""

    drag_alpha_target: float = Field(0.5, gt=0.0, le=1.0)


class RenderSettings(BaseModel):
    """Canvas and glyph sizes for the static HTML renderer."""

    width: int = Field(960, gt=0)
    height: int = Field(720, gt=0)
    margin: int = Field(20, ge=0)
    node_radius: float = Field(7.0, gt=0.0)
    font_size: int = Field(12, gt=0)


class GraphSettings(BaseModel):
    """Top-level settings document."""

    data_store: DataStoreSettings = Field(default_factory=DataStoreSettings)
    layout: LayoutSettings = Field(default_factory=LayoutSettings)
    interaction: InteractionSettings = Field(default_factory=InteractionSettings)
    render: RenderSettings = Field(default_factory=RenderSettings)


def load_settings(config_path: Path | str | None = None) -> GraphSettings:
    """Load settings from YAML, falling back to the packaged config.yaml.

    Args:
        config_path: Path to a settings YAML file (packaged default if None)

    Returns:
        Validated settings; sections missing from the file keep their defaults
    """
    if config_path is None:
        from importlib import resources

        with resources.files("lighthousegraph").joinpath("config.yaml").open() as f:
            data = yaml.safe_load(f)
    else:
        with open(config_path) as f:
            data = yaml.safe_load(f)

    return GraphSettings.model_validate(data or {})
