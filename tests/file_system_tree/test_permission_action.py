"""Unit tests for the permission_action module."""

from dirtree.file_system_tree.permission_action import PermissionAction


def test_permission_action_enum():
    """Test the PermissionAction enum values."""
    assert PermissionAction.IGNORE == "ignore"
    assert PermissionAction.WARN == "warn"

    assert PermissionAction("ignore") == PermissionAction.IGNORE
    assert PermissionAction("warn") == PermissionAction.WARN
