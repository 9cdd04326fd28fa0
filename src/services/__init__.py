"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They coordinate between entities, ports, and external systems.

This layer contains:
- Home and detail aggregation (concurrent batches over the catalog provider)
- Saved items ("My List") resolution and management
- Subtitle ranking and retrieval

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""
