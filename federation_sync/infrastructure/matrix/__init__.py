"""
Matrix Layer - Outbound client for the federated network.
"""

from federation_sync.infrastructure.matrix.http_client import create_homeserver_client
from federation_sync.infrastructure.matrix.matrix_bridge import MatrixFederationBridge

__all__ = [
    "create_homeserver_client",
    "MatrixFederationBridge",
]
