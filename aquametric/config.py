#!/usr/bin/env python3
"""
Configuration module for AquaMetric pond monitoring
Reads from environment variables with fallbacks to .env file
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
project_root = Path(__file__).resolve().parent.parent
env_file = project_root / '.env'
load_dotenv(env_file)

# Also try to load from package directory as fallback
env_path = Path(__file__).parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

DEFAULT_SECRET_KEY = 'dev-secret-key-change-in-production'


class Config:
    """Configuration class that reads from environment variables"""
    
    # Flask Configuration
    SECRET_KEY = os.getenv('SECRET_KEY', DEFAULT_SECRET_KEY)
    FLASK_ENV = os.getenv('FLASK_ENV', 'development')
    FLASK_DEBUG = os.getenv('FLASK_DEBUG', 'false').lower() == 'true'
    
    # Server Configuration
    HOST = os.getenv('HOST', '0.0.0.0' if os.getenv('FLASK_ENV') == 'production' else 'localhost')
    PORT = int(os.getenv('PORT', '5001'))
    
    # Time Configuration - "today" for elapsed rearing days is evaluated here
    DEFAULT_TIMEZONE = os.getenv('DEFAULT_TIMEZONE', 'Asia/Jakarta')
    
    # Number formatting for total-biomass substitution text (id-ID style: 33.750,5)
    NUMBER_GROUP_SEPARATOR = os.getenv('NUMBER_GROUP_SEPARATOR', '.')
    NUMBER_DECIMAL_SEPARATOR = os.getenv('NUMBER_DECIMAL_SEPARATOR', ',')
    
    # Pond data snapshot
    STATE_FILE = os.getenv('STATE_FILE', 'aquametric-state.json')
    
    # Allowed Origins for CORS
    ALLOWED_ORIGINS = os.getenv('ALLOWED_ORIGINS', 'http://localhost:3000,http://localhost:5001').split(',')
    
    @property
    def is_production(self):
        """Check if running in production environment"""
        return self.FLASK_ENV == 'production'
    
    def get_state_path(self):
        """Get state snapshot path, resolved against the project root when relative"""
        state_path = Path(self.STATE_FILE)
        if state_path.is_absolute():
            return state_path
        return project_root / state_path

# Create singleton instance
config = Config()
