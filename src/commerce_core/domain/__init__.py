"""Domain layer - Core business logic, entities, and rules.

This layer contains:
- Value Objects: Money, Email, PhoneNumber and entity identifiers
- Entities: Member, Order (with OrderItem) and Payment, each with a lifecycle
- Domain Events: facts recorded by aggregates, published by the application layer
- Domain Services: Order and payment rules that span several entities
- Specifications: Composable predicates for member and order filtering
- Domain Exceptions: Invalid arguments and illegal state transitions

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
