"""Architecture model elements.

- **Protocols**: Identifiable, Taggable, Parented (combined as ModelElement)
- **Elements**: DeploymentEnvironment
"""
from __future__ import annotations

from .deployment_environment import DeploymentEnvironment
from .protocols import Identifiable, ModelElement, Parented, Taggable

__all__ = [
    "Identifiable",
    "Taggable",
    "Parented",
    "ModelElement",
    "DeploymentEnvironment",
]
