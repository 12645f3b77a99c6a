"""Core domain package for mission relay.

Core contains the message handlers, the chain manager and the outcome types
without any console or file-specific code, keeping the classification logic
portable.
"""
