"""Infrastructure layer - Adapters for domain protocols (ports).

Structure:
- events/: in-memory event bus and event handlers
- logging/: structlog console adapter
- persistence/: SQLAlchemy database, table mapping, repositories and unit of work

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
