import json

from duotrigordle.config.game_settings import NUM_BOARDS, NUM_GUESSES, GAME_STORAGE_KEY
from duotrigordle.services.puzzle_service import get_target_words
from duotrigordle.utils.helpers import get_todays_id


def _today_targets():
    return get_target_words(get_todays_id())


def test_todays_puzzle(client):
    response = client.get('/api/puzzle/today')
    assert response.status_code == 200
    body = response.get_json()
    assert body['id'] == get_todays_id()
    assert body['num_boards'] == NUM_BOARDS
    assert body['num_guesses'] == NUM_GUESSES


def test_new_game_requires_player(client):
    response = client.post('/api/games', json={})
    assert response.status_code == 400
    assert response.get_json()['success'] is False


def test_new_game_requires_json(client):
    response = client.post('/api/games', data='nope', content_type='text/plain')
    assert response.status_code == 400


def test_daily_game_flow(client):
    response = client.post('/api/games', json={'player_id': 'alice'})
    assert response.status_code == 201
    game = response.get_json()['game']
    assert game['id'] == get_todays_id()
    assert len(game['boards']) == NUM_BOARDS

    target = _today_targets()[0]
    response = client.post('/api/games/alice/guess', json={'guess': target.lower()})
    assert response.status_code == 200
    game = response.get_json()['game']
    assert game['guesses'] == [target]
    assert game['boards'][0]['solved']
    assert game['boards'][0]['colors'] == ['GGGGG']
    assert game['boards_solved'] == 1

    response = client.get('/api/games/alice')
    assert response.get_json()['game']['guesses'] == [target]


def test_load_without_saved_game_starts_fresh(client):
    response = client.get('/api/games/nobody')
    assert response.status_code == 200
    game = response.get_json()['game']
    assert game['guesses'] == []
    assert game['id'] == get_todays_id()


def test_invalid_guess(client):
    client.post('/api/games', json={'player_id': 'bob'})
    response = client.post('/api/games/bob/guess', json={'guess': 'QQQQQ'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Word not in word list'

    response = client.post('/api/games/bob/guess', json={})
    assert response.status_code == 400


def test_winning_game(client):
    client.post('/api/games', json={'player_id': 'carol'})
    for target in _today_targets():
        response = client.post('/api/games/carol/guess', json={'guess': target})
        assert response.status_code == 200
    game = response.get_json()['game']
    assert game['game_over']
    assert game['won']

    response = client.post('/api/games/carol/guess', json={'guess': _today_targets()[0]})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Game is already over'


def test_practice_game(client):
    response = client.get('/api/games/dave?practice=true')
    assert response.status_code == 404

    response = client.post('/api/games', json={'player_id': 'dave', 'practice': True})
    game = response.get_json()['game']
    assert game['practice']

    response = client.get('/api/games/dave?practice=true')
    assert response.get_json()['game']['id'] == game['id']

    assert client.delete('/api/games/dave/practice').status_code == 200
    assert client.delete('/api/games/dave/practice').status_code == 404


def test_settings(client):
    response = client.get('/api/settings/erin')
    assert response.status_code == 200
    assert response.get_json()['settings']['colorBlindMode'] is False

    response = client.put('/api/settings/erin', json={'colorBlindMode': True, 'unknown': 1})
    settings = response.get_json()['settings']
    assert settings['colorBlindMode'] is True
    assert 'unknown' not in settings

    response = client.get('/api/settings/erin')
    assert response.get_json()['settings']['colorBlindMode'] is True


def test_health(client):
    response = client.get('/api/health')
    assert response.status_code == 200
    body = response.get_json()
    assert body['status'] == 'healthy'
    assert body['storage_backend'] == 'MemoryStore'


def test_missing_service_returns_500(client, monkeypatch):
    from duotrigordle.services import game_service
    monkeypatch.setattr(game_service, '_game_service', None)
    response = client.get('/api/games/frank')
    assert response.status_code == 500
    assert response.get_json()['error'] == 'Game service unavailable'


def test_stored_short_guess_starts_fresh_game(client, storage_service):
    record = {'id': get_todays_id(), 'guesses': ['AB'], 'startTime': 0, 'endTime': 0}
    storage_service.store.set_item('mallory', GAME_STORAGE_KEY, json.dumps(record))

    response = client.get('/api/games/mallory')
    assert response.status_code == 200
    game = response.get_json()['game']
    assert game['guesses'] == []
    assert game['id'] == get_todays_id()

    target = _today_targets()[0]
    response = client.post('/api/games/mallory/guess', json={'guess': target})
    assert response.status_code == 200
    assert response.get_json()['game']['guesses'] == [target]
