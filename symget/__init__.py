"""
Read-only lookups, by name, in a hierarchical namespace registry.
See symget.introspect for the entry point.
"""
