"""Command line front-end for the unisig adapters."""
