"""Domain layer package.

The domain layer contains pure business logic with zero external dependencies.
It includes value objects, entities, domain events, domain services, and
domain exceptions for the reservation queue.
"""

__all__ = []
