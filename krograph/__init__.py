"""Resource group building blocks: expressions, schemas, metadata, finalizers and validation."""

__version__ = "0.1.0"