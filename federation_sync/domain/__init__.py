"""
DOMAIN LAYER - Federation model

This layer contains:
- Entities: FederatedUser, FederatedRoom
- Value Objects: RoomType, AvatarFile, AvatarMetadata, LocalUserReference
- Ports: Interfaces that infrastructure implements (directories, file store, bridge)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports
2. NO I/O operations
3. Only depends on Python stdlib
"""
