"""Command-line interface.

The CLI is invoked via the ``namespace-search`` script or
``python -m namespace_search.adapters.inbound.cli.commands``.
"""
