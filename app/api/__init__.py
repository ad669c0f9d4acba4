"""
API Router module that combines all API endpoints
"""
from fastapi import APIRouter
import logging

# Import all the individual routers
from app.api.webhooks import router as webhooks_router

# Set up logging
logger = logging.getLogger(__name__)

# Create the main router that includes all the others
router = APIRouter()

# Include all the routers
router.include_router(webhooks_router)
