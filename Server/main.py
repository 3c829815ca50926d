"""
Duotrigordle Server - Main Entry Point

This is the main entry point for the duotrigordle server.
It initializes all services and starts the Flask application.
"""

import os
from duotrigordle import create_app
from duotrigordle.config import config, validate_word_list_integrity, get_word_statistics
from duotrigordle.services.game_service import initialize_game_service
from duotrigordle.services.storage_service import initialize_storage_service
from duotrigordle.utils.game_logger import game_logger
from duotrigordle.utils.helpers import get_todays_id


def main():
    """Main function to initialize services and start the server."""
    config_class = config.get(os.getenv('FLASK_ENV', 'default'), config['default'])
    storage_service = None
    try:
        print("Initializing services...")

        validate_word_list_integrity()
        print(f"✓ Word list validated ({get_word_statistics()['total_words']} words)")

        storage_service = initialize_storage_service(config_class.MONGO_URI, config_class.MONGO_DB)
        if storage_service:
            print(f"✓ Storage service initialized ({type(storage_service.store).__name__})")
        else:
            print("✗ Failed to initialize storage service")

        game_service = initialize_game_service()
        if game_service:
            print("✓ Game service initialized successfully")
        else:
            print("✗ Failed to initialize game service")

        print("Creating Flask application...")
        app = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info(f"Duotrigordle Server Starting - today's puzzle is #{get_todays_id()}")

        print(f"\nStarting Duotrigordle Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Duotrigordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise
    finally:
        if storage_service:
            storage_service.store.close_connection()


if __name__ == '__main__':
    main()
