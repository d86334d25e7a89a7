"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from wildcards.api.v1.endpoints import (
    cards, animals, images, attributes, actions, effects, uploads
)

api_router = APIRouter()

# Include all endpoint routers
# Note: Each router already defines its own prefix, so we don't add another one here
api_router.include_router(cards.router)
api_router.include_router(animals.router)
api_router.include_router(images.router)
api_router.include_router(attributes.router)
api_router.include_router(actions.router)
api_router.include_router(effects.router)
api_router.include_router(uploads.router)
