"""kubeoptic - terminal browser for cluster workloads and their live logs."""

__version__ = "0.1.0"
