"""Sample collection package scanned by discovery tests."""
