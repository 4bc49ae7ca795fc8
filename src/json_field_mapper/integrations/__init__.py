"""Integrations subpackage for json-field-mapper.

Contains the pytest plugin (auto-discovered via the pytest11 entry point).
"""
