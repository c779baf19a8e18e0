# Pond API Module
# 
# Contains Flask Blueprint for pond API routes

from .pond_routes import pond_bp

__all__ = ['pond_bp']
