"""
Core domain models, contracts, configuration and logging setup.

This module contains the foundational building blocks of the order ledger
that are independent of presentation (demo harness, console output).
"""
