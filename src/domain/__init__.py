"""Domain layer - Pure business logic.

This layer contains the member entity, value objects, typed errors and the
protocols (ports) the application layer depends on. The domain layer has NO
dependencies on any framework or infrastructure.

Structure:
- entities/: Domain entities (mutable, have identity)
- value_objects/: Value objects (immutable, no identity)
- enums/: Domain enumerations
- errors/: Typed domain errors (returned in Result, never raised)
- protocols/: Repository and service interfaces
"""
