"""Utility modules for Recipe Tracker."""
