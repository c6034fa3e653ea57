"""
API Module

FastAPI application and route handlers.

Package Structure:
==================
    api/
    ├── main.py           ← Application entry point
    ├── routes.py         ← Route registration
    ├── dependencies/     ← Store, services, current user
    ├── handlers/         ← Route handlers
    └── middleware/       ← Error handling, request logging

Usage:
======
    # Run the API
    uvicorn socialstream.api.main:app --reload

    # Import the app
    from socialstream.api.main import app, create_application
"""
