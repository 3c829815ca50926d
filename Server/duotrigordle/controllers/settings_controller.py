"""
Settings Controller

Handles loading and saving of player display settings.
"""

from flask import Blueprint, request, jsonify
from ..services.storage_service import get_storage_service, merge_settings, settings_to_dict
from ..utils.decorators import require_service, require_json
from ..utils.game_logger import game_logger

settings_bp = Blueprint('settings', __name__)


@settings_bp.route('/settings/<player_id>', methods=['GET'])
@require_service(get_storage_service, 'Storage')
def get_settings(player_id):
    """Get a player's settings, defaults filled in."""
    try:
        game_logger.log_user_action(request, 'get_settings')

        settings = get_storage_service().load_settings(player_id)
        response_data = {
            'success': True,
            'settings': settings_to_dict(settings)
        }
        game_logger.log_server_response(request, 'get_settings', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_settings')
        return jsonify({'success': False, 'error': str(e)}), 500


@settings_bp.route('/settings/<player_id>', methods=['PUT'])
@require_service(get_storage_service, 'Storage')
@require_json
def update_settings(player_id):
    """Merge the given keys into a player's settings and save them."""
    try:
        storage_service = get_storage_service()
        data = request.get_json()

        game_logger.log_user_action(request, 'update_settings', keys=sorted(data.keys()))

        settings = merge_settings(storage_service.load_settings(player_id), data)
        storage_service.save_settings(player_id, settings)

        response_data = {
            'success': True,
            'settings': settings_to_dict(settings)
        }
        game_logger.log_server_response(request, 'update_settings', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'update_settings')
        return jsonify({'success': False, 'error': str(e)}), 500
