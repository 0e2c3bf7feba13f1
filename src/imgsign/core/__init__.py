"""Directive model, rendering, signing and configuration primitives."""
