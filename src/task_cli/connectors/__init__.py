"""
Front ends that feed command lines into the registry.

- console_connector.py: interactive stdin loop + one-shot argv mode
"""
