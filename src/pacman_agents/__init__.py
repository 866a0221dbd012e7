"""Scripted maze agents."""
