"""Application layer: DTOs, interfaces, services, use cases.

Depends on domain and protocol definitions. Infrastructure implements
the interfaces (repositories, cache).
"""
