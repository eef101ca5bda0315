"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- services/  → UserFederationSender (avatar and typing propagation)
- dto/       → Payloads of the internal events the service reacts to
- common/    → Guarded pipeline primitives

Rules:
- Depends on Domain layer (plus observability counters)
- No HTTP/framework code here
- Coordinates entities, directories, the file store and the bridge
"""
