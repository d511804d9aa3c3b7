"""Base layer shared by provider adapters.

Contains the error taxonomy, structured logging, HTTP transport, message
models and collaborator protocols. Provider packages depend on this layer,
never the other way around.
"""
