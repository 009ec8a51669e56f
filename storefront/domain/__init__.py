"""Domain layer - Pure business logic.

This layer contains the business entities, value objects, protocols
(ports), domain services, and domain events. The domain layer has NO
dependencies on any framework or infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (mutable, have identity)
- value_objects/: Value objects (immutable, no identity)
- protocols/: Domain protocols (repository, dispatcher, logger interfaces)
- services/: Domain services operating on several entities
- events/: Domain events (things that happened in the domain)
"""
