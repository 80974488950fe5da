"""Infrastructure Layer: database engine, store implementation and logging.

Invariants:
    - Infrastructure never imports from api/
    - All SQLAlchemy failures leave this layer as StoreError
"""
