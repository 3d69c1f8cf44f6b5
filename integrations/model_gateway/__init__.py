"""Hosted generative model integration for YouTube Content Optimizer."""

from integrations.model_gateway.config import GatewaySettings, load_settings
from integrations.model_gateway.gateway import ModelGateway

__all__ = [
    "GatewaySettings",
    "ModelGateway",
    "load_settings",
]
