"""Donnie's Tacos: an arcade game where rumours move the stock market."""

__version__ = "0.1.0"