# API Routes Module
from app.api.routes import (
    recommendations,
    colleges,
)

__all__ = [
    "recommendations",
    "colleges",
]
