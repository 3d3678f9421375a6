"""Scaffolding and documentation generators for FHEVM example repositories."""
