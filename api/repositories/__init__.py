"""
API Repositories - Snapshot storage abstraction layer

Provides a clean interface for storing what the scheduled jobs compute,
swappable between local file storage (current) and a database (future).

Pattern: Repository Pattern
"""
