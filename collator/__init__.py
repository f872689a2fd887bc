"""Core package for collating SRT transcript fragments into one document.

This package provides typed, testable modules that the CLI script imports.
"""
