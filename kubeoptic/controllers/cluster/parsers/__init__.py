"""Parsers for kubeconfig files and kubectl JSON output."""

from kubeoptic.controllers.cluster.parsers.kubeconfig_parser import (
    KubeconfigParser,
    discover_kubeconfig,
)
from kubeoptic.controllers.cluster.parsers.resource_parser import ResourceParser

__all__ = ["KubeconfigParser", "ResourceParser", "discover_kubeconfig"]
