"""Shared utilities: errors, logging, decorators, paths."""
