"""State/store layer.

This package is the single owner of the admin store state: every action
replaces the immutable :class:`AdminStoreState` record through the
:class:`StateContainer`, which notifies subscribers of each change.
"""
