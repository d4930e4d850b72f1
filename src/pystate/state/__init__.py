"""State container layer.

This package holds the reactive state container, the update variants it
accepts, and the dot-path helpers used to address nested values.
"""
