"""Core application package following Clean Architecture.

Layers:
- domain: entities, repository contracts and use cases (conversion, oracle)
- data: repository implementations (static answer set)
- presentation: FastAPI routers and the console host
- core: configuration, DI, and utilities
"""
