"""Graph algorithms, Hamiltonian cycle searches and bastion route planning."""

__version__ = "0.1.0"