"""
Shared Config Module
====================

Configuration settings used by the Jump application.

Structure:
- settings/: YAML configuration files (defaults, project, user)
"""
