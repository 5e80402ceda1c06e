"""Scripted dialogue shown as a chat conversation."""
