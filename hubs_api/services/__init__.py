# Services package init
"""
Lambda Hubs API — Services Layer
==================================

What:  Data access sitting between the route groups (HTTP) and the database.
How:   Each service receives an async_sessionmaker when it is constructed and
       runs every public method in one transaction. Route groups receive the
       service as an argument, so tests can hand them an AsyncMock instead.

Service Inventory:
    - SessionService (base): per-call session + transaction, SQLAlchemy errors → DatabaseError
    - HubService: hubs and messages
    - AdopterService: adopters and dogs
"""
