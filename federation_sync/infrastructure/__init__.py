"""
INFRASTRUCTURE LAYER - Port implementations

- persistence/ → Prisma user and room directories
- storage/     → Avatar files (Prisma metadata + disk bytes)
- settings/    → Federation switches from the environment
- matrix/      → FederationBridge over the Matrix client-server API
- events/      → In-process event bus feeding the listener
"""
