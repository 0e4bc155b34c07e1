def _connected(sio_client):
    if not sio_client.is_connected('/ws'):
        sio_client.connect(namespace='/ws')
    assert sio_client.is_connected('/ws')
    # Flush any initial events
    sio_client.get_received('/ws')
    return sio_client


def test_socket_connect_and_join(sio_client):
    _connected(sio_client)
    sio_client.emit('join_leaderboard', {'game': 'fruit'}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'joined' and pkt['args'][0]['room'] == 'leaderboard:fruit' for pkt in received)


def test_join_rejects_unknown_or_missing_game(sio_client):
    _connected(sio_client)
    sio_client.emit('join_leaderboard', {'game': 'chess'}, namespace='/ws')
    sio_client.emit('join_leaderboard', {}, namespace='/ws')
    errors = [pkt for pkt in sio_client.get_received('/ws') if pkt['name'] == 'error']
    assert len(errors) == 2


def test_ping_echoes(sio_client):
    _connected(sio_client)
    sio_client.emit('ping', {'n': 1}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'pong' and pkt['args'][0] == {'n': 1} for pkt in received)


def test_submit_broadcasts_update_to_room(sio_client, client):
    _connected(sio_client)
    sio_client.emit('join_leaderboard', {'game': 'fruit'}, namespace='/ws')
    sio_client.get_received('/ws')

    client.post('/api/leaderboards/potato', json={'name': 'Other', 'score': 3})
    client.post('/api/leaderboards/fruit', json={'name': 'Alice', 'score': 9})

    updates = [pkt for pkt in sio_client.get_received('/ws') if pkt['name'] == 'leaderboard_update']
    assert len(updates) == 1
    payload = updates[0]['args'][0]
    assert payload['game'] == 'fruit'
    assert payload['entry']['name'] == 'Alice'
    assert payload['total'] == 1


def test_reset_broadcasts_and_leave_stops_updates(sio_client, client):
    _connected(sio_client)
    sio_client.emit('join_leaderboard', {'game': 'flappy'}, namespace='/ws')
    sio_client.get_received('/ws')

    client.post('/api/admin/reset/all')
    resets = [pkt for pkt in sio_client.get_received('/ws') if pkt['name'] == 'leaderboard_reset']
    assert [pkt['args'][0]['game'] for pkt in resets] == ['flappy']

    sio_client.emit('leave_leaderboard', {'game': 'flappy'}, namespace='/ws')
    assert any(pkt['name'] == 'left' for pkt in sio_client.get_received('/ws'))
    client.post('/api/leaderboards/flappy', json={'score': 1})
    assert not any(pkt['name'] == 'leaderboard_update' for pkt in sio_client.get_received('/ws'))
