"""Application layer - Use cases and port definitions.

This layer contains:
- Use Cases: member registration, ordering and payment workflows
- Ports: Abstract interfaces for repositories, events, time, locks and references

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
