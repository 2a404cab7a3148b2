"""Tools for migrating kube-starrocks chart values and linking changelog PR numbers."""

__version__ = "0.1.0"
__all__ = ["migrate", "changelog_links"]