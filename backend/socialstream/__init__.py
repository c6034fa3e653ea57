"""
SocialStream Backend

Media sharing with user tiers, live rooms and AI-assisted tagging.

Package Structure:
==================
    socialstream/
    ├── api/        ← FastAPI application
    ├── shared/     ← Models, store, repositories, services
    └── config/     ← Configuration

Running the Application:
========================
    uvicorn socialstream.api.main:app --reload
"""
