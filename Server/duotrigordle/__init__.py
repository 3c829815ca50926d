"""
Duotrigordle Server Application Package

Serves the daily duotrigordle puzzle: 32 five-letter boards solved with one
shared sequence of guesses. Puzzle boards are derived deterministically
from the day number, so every player gets the same boards on the same day.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.
    
    Args:
        config_class: Configuration class to use
        
    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    
    # Initialize extensions
    CORS(app)
    
    # Register blueprints
    from .controllers.game_controller import game_bp
    from .controllers.settings_controller import settings_bp
    
    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(settings_bp, url_prefix='/api')
    
    return app
