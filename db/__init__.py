"""
db/ - Database Layer
====================
Handles the PostgreSQL connection, its background watcher and schema bootstrap.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
