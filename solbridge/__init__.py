"""HTTP service for Solana keypairs, message signatures and SOL transfer instructions."""

__version__ = "0.1.0"
__all__ = ["__version__"]