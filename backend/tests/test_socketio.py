WALLET = '0x1234567890123456789012345678901234567890'


def test_socket_connect_and_join(sio_client):
    # Ensure we are connected to /ws
    if not sio_client.is_connected('/ws'):
        sio_client.connect(namespace='/ws')
    assert sio_client.is_connected('/ws')

    sio_client.emit('join_leaderboard', {}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] in ('connected', 'joined') for pkt in received)


def test_accepted_submission_is_broadcast(sio_client, client):
    sio_client.emit('join_leaderboard', {}, namespace='/ws')
    sio_client.get_received('/ws')  # flush

    res = client.post('/api/scores/submit', json={'wallet_address': WALLET, 'score': 777, 'player_name': 'Ada'})
    assert res.status_code == 201

    events = sio_client.get_received('/ws')
    updates = [e for e in events if e['name'] == 'leaderboard_update']
    assert len(updates) == 1
    entry = updates[0]['args'][0]
    assert entry['score'] == 777
    assert entry['player_name'] == 'Ada'
    assert entry['id'] == res.get_json()['data']['id']


def test_rejected_submission_is_not_broadcast(sio_client, client):
    sio_client.emit('join_leaderboard', {}, namespace='/ws')
    sio_client.get_received('/ws')

    res = client.post('/api/scores/submit', json={'wallet_address': WALLET, 'score': 99999})
    assert res.status_code == 400
    events = sio_client.get_received('/ws')
    assert not any(e['name'] == 'leaderboard_update' for e in events)


def test_leave_stops_updates(sio_client, client):
    sio_client.emit('join_leaderboard', {}, namespace='/ws')
    sio_client.emit('leave_leaderboard', {}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'left' for pkt in received)

    client.post('/api/scores/submit', json={'wallet_address': WALLET, 'score': 5})
    events = sio_client.get_received('/ws')
    assert not any(e['name'] == 'leaderboard_update' for e in events)
