"""Core balance logic: address validation, balance folding, exceptions."""
