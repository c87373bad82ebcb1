"""Shared test helpers."""

from .fake_notion import FakeBlockSource

__all__ = ['FakeBlockSource']
