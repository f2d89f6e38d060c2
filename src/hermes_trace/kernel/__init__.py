"""Kernel – error hierarchy and security constants shared by every layer."""
