"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..config.game_settings import NUM_BOARDS, NUM_GUESSES, get_word_statistics
from ..services.game_service import get_game_service, game_to_dict, is_valid_guess
from ..services.storage_service import get_storage_service
from ..utils.decorators import require_service, require_json
from ..utils.game_logger import game_logger
from ..utils.helpers import get_todays_id

game_bp = Blueprint('game', __name__)


def _practice_flag(value) -> bool:
    if isinstance(value, str):
        return value.lower() in ('1', 'true', 'yes')
    return bool(value)


@game_bp.route('/puzzle/today', methods=['GET'])
def todays_puzzle():
    """Get today's puzzle id and game rules."""
    try:
        game_logger.log_user_action(request, 'todays_puzzle')

        response_data = {
            'success': True,
            'id': get_todays_id(),
            'num_boards': NUM_BOARDS,
            'num_guesses': NUM_GUESSES
        }
        game_logger.log_server_response(request, 'todays_puzzle', True, response_data, response_data['id'])
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'todays_puzzle')
        return jsonify({'success': False, 'error': str(e)}), 500


@game_bp.route('/games', methods=['POST'])
@require_service(get_game_service, 'Game')
@require_json
def new_game():
    """Start a daily or practice game for a player."""
    try:
        game_service = get_game_service()
        data = request.get_json()

        player_id = data.get('player_id')
        if not player_id or not isinstance(player_id, str):
            error_response = {
                'success': False,
                'error': 'player_id is required'
            }
            game_logger.log_server_response(request, 'new_game', False, error_response)
            return jsonify(error_response), 400

        practice = _practice_flag(data.get('practice', False))

        # Log user action
        game_logger.log_user_action(request, 'new_game', player_id=player_id, practice=practice)

        state = game_service.new_game(player_id, practice)
        response_data = {
            'success': True,
            'game': game_to_dict(state)
        }

        game_logger.log_server_response(request, 'new_game', True, response_data, state.id)
        return jsonify(response_data), 201

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/games/<player_id>', methods=['GET'])
@require_service(get_game_service, 'Game')
def get_game(player_id):
    """Get a player's current game."""
    try:
        game_service = get_game_service()
        practice = _practice_flag(request.args.get('practice', 'false'))

        game_logger.log_user_action(request, 'get_game', practice=practice)

        state = game_service.get_game(player_id, practice)
        if state is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, 'get_game', False, error_response)
            return jsonify(error_response), 404

        response_data = {
            'success': True,
            'game': game_to_dict(state)
        }
        game_logger.log_server_response(
            request, 'get_game', True, response_data, state.id,
            guesses_count=len(state.guesses), game_over=state.game_over
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/games/<player_id>/guess', methods=['POST'])
@require_service(get_game_service, 'Game')
@require_json
def make_guess(player_id):
    """Submit a guess against every board of a player's game."""
    try:
        game_service = get_game_service()
        data = request.get_json()

        if 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response)
            return jsonify(error_response), 400

        guess = data['guess']
        practice = _practice_flag(data.get('practice', False))

        state = game_service.get_game(player_id, practice)
        if state is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response)
            return jsonify(error_response), 404

        game_logger.log_user_action(request, 'submit_guess', state.id, guess=guess, practice=practice)

        # Validate guess first
        is_valid, error = is_valid_guess(state, guess)
        if not is_valid:
            error_response = {
                'success': False,
                'error': error
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, state.id,
                validation_error=error, attempted_guess=guess
            )
            return jsonify(error_response), 400

        # Process guess
        state, error = game_service.make_guess(player_id, guess, practice)
        if state is None:
            error_response = {
                'success': False,
                'error': error or 'Failed to process guess'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response)
            return jsonify(error_response), 500

        response_data = {
            'success': True,
            'game': game_to_dict(state)
        }
        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, state.id,
            guesses_count=len(state.guesses), game_over=state.game_over
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/games/<player_id>/practice', methods=['DELETE'])
@require_service(get_game_service, 'Game')
def delete_practice_game(player_id):
    """Discard a player's practice game."""
    try:
        game_service = get_game_service()
        game_logger.log_user_action(request, 'delete_practice_game')

        success = game_service.delete_practice_game(player_id)
        response_data = {
            'success': success
        }
        game_logger.log_server_response(request, 'delete_practice_game', success, response_data)
        return jsonify(response_data), 200 if success else 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_practice_game')
        return jsonify({'success': False, 'error': str(e)}), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()
        storage_service = get_storage_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'todays_id': get_todays_id(),
            'practice_games': len(game_service.practice_games) if game_service else 0,
            'storage_backend': type(storage_service.store).__name__ if storage_service else None,
            'word_list_size': get_word_statistics().get('total_words', 0),
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
