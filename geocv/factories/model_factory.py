from __future__ import annotations

from geocv.components.interfaces import ModelBuilder
from geocv.contracts.model_configs import ModelConfig
from geocv.registries.models import make_model_builder


def make_model(cfg: ModelConfig, *, seed: int | None = None) -> ModelBuilder:
    """Thin wrapper around the model registry."""

    return make_model_builder(cfg, seed=seed)
