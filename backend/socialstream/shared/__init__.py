"""
Shared Module

Domain code used by the API layer:
- Models: Pydantic records stored in the collections
- Repositories: Data access over the collection store
- Services: Business logic (accounts, content, tiers, AI, rooms)
- Schemas: Pydantic request/response models
- Core: Logging, exceptions
- Adapters: Redis, in-memory and OpenAI integrations

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Collection store and demo seed
    ├── models/         ← Record models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── adapters/       ← External services
    └── utils/          ← Password hashing

Usage:
======
    from socialstream.shared.models import User, Post
    from socialstream.shared.repositories import UserRepository
    from socialstream.shared.services import AuthService
    from socialstream.shared.schemas import RegisterRequest, AuthResponse
    from socialstream.shared.core import logger, SocialStreamException
"""
