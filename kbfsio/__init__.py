"""Dual-backend access to files stored in KBFS."""
