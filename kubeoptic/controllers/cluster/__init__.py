"""Init file for cluster module."""

from kubeoptic.controllers.cluster.controller import KubectlController
from kubeoptic.controllers.cluster.log_stream import KubectlLogStream

__all__ = ["KubectlController", "KubectlLogStream"]
